# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import Base, Database, create_engine_for
from .models import UserRow

__all__ = ["Base", "Database", "UserRow", "create_engine_for"]
