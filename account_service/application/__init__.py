# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.auth_service import AuthService
from .services.password_hashing import WerkzeugPasswordHasher
from .services.token_codec import JwtTokenCodec
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserInput, RegisterUserUseCase

__all__ = [
    "AuthService",
    "JwtTokenCodec",
    "LogoutUserUseCase",
    "RegisterUserInput",
    "RegisterUserUseCase",
    "WerkzeugPasswordHasher",
]
