# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from account_service.domain.users.repositories import SessionStore
from account_service.shared.logging import logger


@dataclass(slots=True)
class SessionEntry:
    user_id: int
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemorySessionStore(SessionStore):
    """Process-local TTL store selected by a ``memory://`` session store URL."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = Lock()
        self._store: dict[str, SessionEntry] = {}

    def put(self, token: str, user_id: int, ttl_seconds: int) -> None:
        expires_at = self._clock() + ttl_seconds
        with self._lock:
            self._store[token] = SessionEntry(user_id=user_id, expires_at=expires_at)
        logger.debug(f"sessions.memory: stored session for user={user_id} ttl={ttl_seconds}s")

    def get(self, token: str) -> int | None:
        now = self._clock()
        with self._lock:
            entry = self._store.get(token)
            if entry is None:
                return None
            if entry.is_expired(now):
                self._store.pop(token, None)
                return None
            return entry.user_id

    def delete(self, token: str) -> None:
        with self._lock:
            self._store.pop(token, None)

    def ping(self) -> None:
        return None

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(1 for entry in self._store.values() if not entry.is_expired(now))


__all__ = ["InMemorySessionStore"]
