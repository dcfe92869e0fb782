# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Literal

from flask import Response, jsonify
from pydantic import BaseModel, Field


class ResponseEnvelope(BaseModel):
    message: str
    data: Any = Field(default_factory=dict)
    exited_code: Literal[0, 1] = 0


def envelope(
    message: str,
    data: Any = None,
    *,
    status: HTTPStatus = HTTPStatus.OK,
) -> tuple[Response, HTTPStatus]:
    exited_code: Literal[0, 1] = 0 if status < HTTPStatus.BAD_REQUEST else 1
    body = ResponseEnvelope(
        message=message,
        data=data if data is not None else {},
        exited_code=exited_code,
    )
    return jsonify(body.model_dump(mode="json")), status


__all__ = ["ResponseEnvelope", "envelope"]
