# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from account_service.domain.users.entities import Currency, Gender, Preferences, User
from account_service.domain.users.exceptions import UserAlreadyExistsError
from account_service.domain.users.repositories import PasswordHasher, UserRepository
from account_service.shared.logging import logger


@dataclass(slots=True, frozen=True)
class RegisterUserInput:
    username: str
    email: str
    password: str
    currency: Currency
    gender: Gender


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, data: RegisterUserInput) -> User:
        username = data.username.lower()
        email = data.email.lower()

        # Fast path only; the store's unique constraints decide concurrent races.
        if self._users.exists(username, email):
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(data.password)
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            currency=data.currency,
            gender=data.gender,
            created_at=datetime.now(UTC),
            preferences=Preferences(),
            backup_code_hashes=(),
        )
        persisted = self._users.add(user)
        logger.info(f"users.register: created user={persisted.id}")
        return persisted
