# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from account_service.domain.users.entities import Currency, Gender, Preferences
from account_service.domain.users.entities import User as DomainUser
from account_service.domain.users.exceptions import UserAlreadyExistsError
from account_service.domain.users.repositories import UserRepository
from account_service.infrastructure.db.models import UserRow
from account_service.infrastructure.db.session import Database
from account_service.shared.errors.base import InternalError
from account_service.shared.logging import logger


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_domain(row: UserRow) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        currency=Currency.parse(row.currency),
        gender=Gender.parse(row.gender),
        created_at=_as_utc(row.created_at),
        preferences=Preferences.from_dict(row.preferences),
        backup_code_hashes=tuple(row.backup_code_hashes or ()),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_identifier(self, identifier: str) -> DomainUser | None:
        needle = identifier.lower()
        stmt = select(UserRow).where(or_(UserRow.username == needle, UserRow.email == needle))
        try:
            with self._db.session_scope() as session:
                row = session.scalars(stmt).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.repository: lookup failed ({type(exc).__name__})")
            raise InternalError("error querying credential store", code="credential_store_error") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        try:
            with self._db.session_scope() as session:
                row = session.get(UserRow, user_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.repository: lookup by id failed ({type(exc).__name__})")
            raise InternalError("error querying credential store", code="credential_store_error") from exc

    def exists(self, username: str, email: str) -> bool:
        stmt = (
            select(UserRow.id)
            .where(or_(UserRow.username == username.lower(), UserRow.email == email.lower()))
            .limit(1)
        )
        try:
            with self._db.session_scope() as session:
                return session.scalars(stmt).first() is not None
        except SQLAlchemyError as exc:
            logger.error(f"users.repository: availability check failed ({type(exc).__name__})")
            raise InternalError(
                "error checking username/email availability", code="credential_store_error"
            ) from exc

    def add(self, user: DomainUser) -> DomainUser:
        row = UserRow(
            username=user.username.lower(),
            email=user.email.lower(),
            password_hash=user.password_hash,
            backup_code_hashes=list(user.backup_code_hashes),
            currency=user.currency.value,
            gender=user.gender.value,
            preferences=user.preferences.to_dict(),
            created_at=user.created_at,
        )
        try:
            with self._db.session_scope() as session:
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.repository: insert rejected by unique constraint")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.repository: insert failed ({type(exc).__name__})")
            raise InternalError("error inserting user into database", code="credential_store_error") from exc
