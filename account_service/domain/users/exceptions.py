# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum
from http import HTTPStatus

from account_service.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    message = "username or email already taken"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "invalid credentials"


class UnauthorizedError(DomainError):
    code = "unauthorized"
    message = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED


class TokenErrorKind(StrEnum):
    MALFORMED = "malformed"
    SIGNATURE_MISMATCH = "signature_mismatch"
    EXPIRED = "expired"


class TokenError(DomainError):
    code = "token_invalid"
    status = HTTPStatus.UNAUTHORIZED

    def __init__(self, kind: TokenErrorKind) -> None:
        super().__init__(f"token {kind.value.replace('_', ' ')}")
        self.kind = kind
