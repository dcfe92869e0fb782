# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application context: every collaborator, built once and passed explicitly."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from account_service.application.services.auth_service import AuthService
from account_service.application.services.password_hashing import WerkzeugPasswordHasher
from account_service.application.services.token_codec import JwtTokenCodec
from account_service.application.use_cases.users.logout_user import LogoutUserUseCase
from account_service.application.use_cases.users.register_user import RegisterUserUseCase
from account_service.auth import AuthMiddleware
from account_service.domain.users.repositories import (
    PasswordHasher,
    SessionStore,
    TokenCodec,
    UserRepository,
)
from account_service.infrastructure.db import Database
from account_service.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from account_service.infrastructure.sessions import build_session_store
from account_service.shared.config import AppConfig


@dataclass(slots=True, frozen=True)
class AppContext:
    config: AppConfig
    database: Database
    users: UserRepository
    sessions: SessionStore
    tokens: TokenCodec
    password_hasher: PasswordHasher
    auth_service: AuthService
    auth_middleware: AuthMiddleware
    register_user_use_case: RegisterUserUseCase
    logout_user_use_case: LogoutUserUseCase


def build_context(
    config: AppConfig,
    *,
    database: Database | None = None,
    users: UserRepository | None = None,
    sessions: SessionStore | None = None,
    password_hasher: PasswordHasher | None = None,
    clock: Callable[[], float] = time.time,
) -> AppContext:
    """
    Wire the service from ``config``.

    Any collaborator may be supplied directly (tests pass in-memory stores or a
    fast hasher); the rest are built from the configured connection strings.
    """
    if database is None:
        database = Database.from_url(config.database_url, timeout=config.store_timeout_seconds)
    if users is None:
        users = SqlAlchemyUserRepository(database)
    if sessions is None:
        sessions = build_session_store(config.redis_url, timeout=config.store_timeout_seconds)
    if password_hasher is None:
        password_hasher = WerkzeugPasswordHasher()
    tokens = JwtTokenCodec(config.token_signing_key, config.token_ttl_seconds, clock=clock)

    return AppContext(
        config=config,
        database=database,
        users=users,
        sessions=sessions,
        tokens=tokens,
        password_hasher=password_hasher,
        auth_service=AuthService(
            users=users,
            sessions=sessions,
            tokens=tokens,
            password_hasher=password_hasher,
        ),
        auth_middleware=AuthMiddleware(tokens=tokens, sessions=sessions),
        register_user_use_case=RegisterUserUseCase(users=users, password_hasher=password_hasher),
        logout_user_use_case=LogoutUserUseCase(sessions=sessions),
    )


__all__ = ["AppContext", "build_context"]
