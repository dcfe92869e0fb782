# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class Gender(StrEnum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: object) -> Gender:
        """Unrecognized values fall back to ``OTHER``."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class Currency(StrEnum):
    COP = "COP"
    USD = "USD"
    EUR = "EUR"

    @classmethod
    def parse(cls, value: object) -> Currency:
        """Unrecognized values fall back to ``USD``."""
        try:
            return cls(value)
        except ValueError:
            return cls.USD


@dataclass(slots=True, frozen=True)
class Preferences:
    dark_mode: bool = False
    language: str = "en"
    notifications: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "dark_mode": self.dark_mode,
            "language": self.language,
            "notifications": self.notifications,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Preferences:
        data = data or {}
        return cls(
            dark_mode=bool(data.get("dark_mode", False)),
            language=str(data.get("language", "en")),
            notifications=bool(data.get("notifications", True)),
        )


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    currency: Currency
    gender: Gender
    created_at: datetime
    preferences: Preferences = field(default_factory=Preferences)
    backup_code_hashes: tuple[str, ...] = ()

    def summary(self) -> UserSummary:
        return UserSummary(
            id=self.id,
            username=self.username,
            email=self.email,
            currency=self.currency,
            gender=self.gender,
            preferences=self.preferences,
            created_at=self.created_at,
        )


@dataclass(slots=True, frozen=True)
class UserSummary:
    """Public projection of a user; carries no secrets."""

    id: int
    username: str
    email: str
    currency: Currency
    gender: Gender
    preferences: Preferences
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "currency": self.currency.value,
            "gender": self.gender.value,
            "preferences": self.preferences.to_dict(),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(slots=True, frozen=True)
class Claims:

    subject: int
    issued_at: int
    expires_at: int


@dataclass(slots=True, frozen=True)
class IssuedCredentials:

    token: str
    user: UserSummary
