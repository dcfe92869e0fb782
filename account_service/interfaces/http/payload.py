# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from account_service.shared.errors.base import ValidationError
from account_service.shared.errors.validation import raise_validation_error

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_payload(model: type[ModelT]) -> ModelT:
    """Validate the JSON body of the current request against ``model``."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("invalid payload: expected a JSON object")
    try:
        return model.model_validate(body)
    except PydanticValidationError as exc:
        raise_validation_error(exc)


__all__ = ["parse_payload"]
