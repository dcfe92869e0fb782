from __future__ import annotations

import threading
from pathlib import Path

import pytest

from account_service.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from account_service.domain.users.entities import Currency, Gender, Preferences
from account_service.domain.users.exceptions import UserAlreadyExistsError
from account_service.infrastructure.db import Database
from account_service.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

from .support import DeterministicHasher, InMemoryUserRepository


def _input(username: str = "Alice", email: str = "Alice@Example.com") -> RegisterUserInput:
    return RegisterUserInput(
        username=username,
        email=email,
        password="secret_pass1",
        currency=Currency.COP,
        gender=Gender.FEMALE,
    )


def test_register_user_success() -> None:
    users = InMemoryUserRepository()
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())

    user = use_case.execute(_input())

    assert user.id == 1
    assert user.username == "alice"
    assert user.email == "alice@example.com"
    assert user.password_hash == "hashed:secret_pass1"
    assert user.backup_code_hashes == ()
    assert user.preferences == Preferences(dark_mode=False, language="en", notifications=True)
    assert users.find_by_identifier("alice") is not None


@pytest.mark.parametrize(
    "username, email",
    [("alice", "other@example.com"), ("ALICE", "other@example.com"), ("carol", "ALICE@example.com")],
)
def test_register_user_duplicate_raises(username: str, email: str) -> None:
    users = InMemoryUserRepository()
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    use_case.execute(_input())

    with pytest.raises(UserAlreadyExistsError):
        use_case.execute(_input(username=username, email=email))


def test_ids_are_assigned_by_the_store(users: SqlAlchemyUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())

    first = use_case.execute(_input("alice", "alice@example.com"))
    second = use_case.execute(_input("bob", "bob@example.com"))

    assert first.id != second.id
    assert users.find_by_id(second.id).username == "bob"


class _RacingRepository(SqlAlchemyUserRepository):
    """Lets both registrations clear the availability check before either inserts."""

    def __init__(self, database: Database, barrier: threading.Barrier) -> None:
        super().__init__(database)
        self._barrier = barrier

    def exists(self, username: str, email: str) -> bool:
        result = super().exists(username, email)
        self._barrier.wait(timeout=5)
        return result


def test_concurrent_registrations_with_same_identifier(tmp_path: Path) -> None:
    database = Database.from_url(f"sqlite:///{tmp_path / 'race.db'}", timeout=10)
    database.init_schema()
    barrier = threading.Barrier(2)
    use_case = RegisterUserUseCase(
        users=_RacingRepository(database, barrier), password_hasher=DeterministicHasher()
    )
    outcomes: list[object] = []
    lock = threading.Lock()

    def register(email: str) -> None:
        try:
            result: object = use_case.execute(_input("alice", email))
        except UserAlreadyExistsError as exc:
            result = exc
        with lock:
            outcomes.append(result)

    threads = [
        threading.Thread(target=register, args=("alice@example.com",)),
        threading.Thread(target=register, args=("alice2@example.com",)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=20)

    try:
        assert len(outcomes) == 2
        assert sum(isinstance(o, UserAlreadyExistsError) for o in outcomes) == 1
        assert SqlAlchemyUserRepository(database).find_by_identifier("alice") is not None
    finally:
        database.dispose()
