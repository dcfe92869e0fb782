# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import (
    Claims,
    Currency,
    Gender,
    IssuedCredentials,
    Preferences,
    User,
    UserSummary,
)
from .users.exceptions import (
    InvalidCredentialsError,
    TokenError,
    TokenErrorKind,
    UnauthorizedError,
    UserAlreadyExistsError,
)

__all__ = [
    "Claims",
    "Currency",
    "Gender",
    "IssuedCredentials",
    "Preferences",
    "User",
    "UserSummary",
    "InvalidCredentialsError",
    "TokenError",
    "TokenErrorKind",
    "UnauthorizedError",
    "UserAlreadyExistsError",
]
