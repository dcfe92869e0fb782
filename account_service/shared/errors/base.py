# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared error hierarchy for the service."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    """Base application exception carrying structured metadata."""

    message: str
    code: str
    status: HTTPStatus

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_envelope(self) -> dict[str, Any]:
        return {"message": self.message, "data": {}, "exited_code": 1}


class DomainError(AppError):
    """Domain-level invariant violation."""

    def __init__(self, message: str | None = None) -> None:
        fallback_message = cast(str, getattr(self, "message", "domain error"))
        resolved_message = message if message is not None else fallback_message
        resolved_code = cast(str, getattr(self, "code", "domain_error"))
        resolved_status = cast(HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST))
        super().__init__(
            message=resolved_message,
            code=resolved_code,
            status=resolved_status,
        )


class InternalError(AppError):
    def __init__(self, message: str, code: str = "internal_error") -> None:
        super().__init__(message=message, code=code, status=HTTPStatus.INTERNAL_SERVER_ERROR)


class ValidationError(AppError):
    def __init__(self, message: str, code: str = "validation_error") -> None:
        super().__init__(message=message, code=code, status=HTTPStatus.BAD_REQUEST)
