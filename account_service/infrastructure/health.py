# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from account_service.infrastructure.db import Database


class _Pingable(Protocol):
    def ping(self) -> None: ...


def check_database(database: Database) -> bool:
    database.ping()
    return True


def check_session_store(store: _Pingable) -> bool:
    store.ping()
    return True


__all__ = ["check_database", "check_session_store"]
