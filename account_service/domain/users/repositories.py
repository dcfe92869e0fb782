# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Claims, User


class UserRepository(Protocol):
    def find_by_identifier(self, identifier: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def exists(self, username: str, email: str) -> bool: ...
    def add(self, user: User) -> User: ...


class SessionStore(Protocol):
    def put(self, token: str, user_id: int, ttl_seconds: int) -> None: ...
    def get(self, token: str) -> int | None: ...
    def delete(self, token: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenCodec(Protocol):
    ttl_seconds: int

    def issue(self, user_id: int) -> str: ...
    def verify(self, token: str) -> Claims: ...
