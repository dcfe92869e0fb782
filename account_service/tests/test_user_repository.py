from __future__ import annotations

from unittest import mock

import pytest
from sqlalchemy.exc import OperationalError

from account_service.domain.users.entities import Currency, Gender, User
from account_service.domain.users.exceptions import UserAlreadyExistsError
from account_service.infrastructure.db import Database, UserRow
from account_service.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from account_service.shared.errors.base import InternalError

from .support import make_user


def test_add_persists_lower_cased_identity(users: SqlAlchemyUserRepository) -> None:
    stored = users.add(make_user(username="Alice", email="Alice@Example.com"))

    assert stored.id > 0
    assert stored.username == "alice"
    assert stored.email == "alice@example.com"
    assert stored.created_at.tzinfo is not None


@pytest.mark.parametrize("identifier", ["alice", "ALICE", "alice@example.com", "ALICE@EXAMPLE.COM"])
def test_find_by_identifier_is_case_insensitive(
    users: SqlAlchemyUserRepository, alice: User, identifier: str
) -> None:
    found = users.find_by_identifier(identifier)

    assert found is not None
    assert found.id == alice.id


def test_find_by_identifier_unknown(users: SqlAlchemyUserRepository, alice: User) -> None:
    assert users.find_by_identifier("nobody") is None


def test_find_by_id_round_trips_fields(users: SqlAlchemyUserRepository, alice: User) -> None:
    found = users.find_by_id(alice.id)

    assert found == alice
    assert found.currency is Currency.EUR
    assert found.gender is Gender.FEMALE
    assert found.backup_code_hashes == ()


def test_exists_matches_username_or_email(users: SqlAlchemyUserRepository, alice: User) -> None:
    assert users.exists("ALICE", "new@example.com") is True
    assert users.exists("newbie", "alice@example.com") is True
    assert users.exists("newbie", "new@example.com") is False


@pytest.mark.parametrize(
    "username, email", [("alice", "other@example.com"), ("other", "alice@example.com")]
)
def test_unique_constraint_rejects_duplicates(
    users: SqlAlchemyUserRepository, alice: User, username: str, email: str
) -> None:
    with pytest.raises(UserAlreadyExistsError):
        users.add(make_user(username=username, email=email))


def test_unknown_enum_values_in_storage_fall_back(database: Database, users: SqlAlchemyUserRepository) -> None:
    with database.session_scope() as session:
        row = UserRow(
            username="legacy",
            email="legacy@example.com",
            password_hash="hashed:x",
            backup_code_hashes=["h1"],
            currency="GBP",
            gender="unknown",
            preferences={},
        )
        session.add(row)

    found = users.find_by_identifier("legacy")

    assert found.currency is Currency.USD
    assert found.gender is Gender.OTHER
    assert found.backup_code_hashes == ("h1",)
    assert found.preferences.language == "en"


def test_store_failures_surface_as_internal_errors(database: Database) -> None:
    users = SqlAlchemyUserRepository(database)
    failure = OperationalError("SELECT 1", {}, Exception("connection refused"))

    with mock.patch.object(database, "session_scope", side_effect=failure):
        with pytest.raises(InternalError):
            users.find_by_identifier("alice")
        with pytest.raises(InternalError):
            users.exists("alice", "alice@example.com")
        with pytest.raises(InternalError):
            users.add(make_user())
