# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redis-backed session records: ``SET session:<token> <user_id> EX <ttl>``."""

from __future__ import annotations

import hashlib

import redis

from account_service.domain.users.repositories import SessionStore
from account_service.shared.errors.base import InternalError
from account_service.shared.logging import logger

KEY_PREFIX = "session:"


def _fingerprint(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()[:8]


class RedisSessionStore(SessionStore):
    """
    Thin adapter over a :class:`redis.Redis` client.

    The client is thread safe and checks a connection out of its pool per
    command, so one instance serves every request thread. Socket timeouts are
    set on the client; a timed-out command surfaces as :class:`InternalError`.
    """

    def __init__(self, client: redis.Redis, *, key_prefix: str = KEY_PREFIX) -> None:
        self._client = client
        self._prefix = key_prefix

    @classmethod
    def from_url(cls, url: str, *, timeout: float = 5.0) -> RedisSessionStore:
        client = redis.Redis.from_url(
            url,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
        )
        return cls(client)

    def _key(self, token: str) -> str:
        return f"{self._prefix}{token}"

    def put(self, token: str, user_id: int, ttl_seconds: int) -> None:
        try:
            self._client.set(self._key(token), str(user_id), ex=ttl_seconds)
        except redis.exceptions.RedisError as exc:
            logger.error(f"sessions.redis: put failed ({type(exc).__name__})")
            raise InternalError("error storing session", code="session_store_error") from exc

    def get(self, token: str) -> int | None:
        try:
            value = self._client.get(self._key(token))
        except redis.exceptions.RedisError as exc:
            logger.error(f"sessions.redis: get failed ({type(exc).__name__})")
            raise InternalError("error reading session", code="session_store_error") from exc

        if value is None:
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        try:
            return int(value)
        except ValueError:
            logger.error(f"sessions.redis: corrupt session record tok=<{_fingerprint(token)}>")
            return None

    def delete(self, token: str) -> None:
        try:
            self._client.delete(self._key(token))
        except redis.exceptions.RedisError as exc:
            logger.error(f"sessions.redis: delete failed ({type(exc).__name__})")
            raise InternalError("error deleting session", code="session_store_error") from exc

    def ping(self) -> None:
        try:
            self._client.ping()
        except redis.exceptions.RedisError as exc:
            raise InternalError("session store unreachable", code="session_store_error") from exc

    def close(self) -> None:
        self._client.close()


__all__ = ["KEY_PREFIX", "RedisSessionStore"]
