# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .memory_store import InMemorySessionStore
from .redis_store import RedisSessionStore


def build_session_store(url: str, *, timeout: float = 5.0) -> InMemorySessionStore | RedisSessionStore:
    if url.startswith("memory://"):
        return InMemorySessionStore()
    return RedisSessionStore.from_url(url, timeout=timeout)


__all__ = ["InMemorySessionStore", "RedisSessionStore", "build_session_store"]
