# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def first_error_message(exc: PydanticValidationError) -> str:
    errors = exc.errors(include_url=False)
    if not errors:
        return "invalid payload"

    error = errors[0]
    if error.get("type", "").startswith("account_service."):
        return str(error["msg"])

    loc = error.get("loc", ())
    field_path = ".".join(str(part) for part in loc if part is not None)
    if field_path:
        return f"invalid payload: {field_path}: {error['msg']}"
    return f"invalid payload: {error['msg']}"


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(first_error_message(exc)) from exc


__all__ = [
    "first_error_message",
    "raise_validation_error",
]
