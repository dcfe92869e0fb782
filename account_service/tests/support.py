from __future__ import annotations

from datetime import UTC, datetime

from account_service.domain.users.entities import Currency, Gender, Preferences, User
from account_service.domain.users.exceptions import UserAlreadyExistsError
from account_service.domain.users.repositories import PasswordHasher, UserRepository

SIGNING_KEY = "test-signing-key-0123456789abcdef-0123"
PASSWORD = "secret_pass1"


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_identifier(self, identifier: str) -> User | None:
        needle = identifier.lower()
        for user in self._users.values():
            if needle in (user.username, user.email):
                return user
        return None

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def exists(self, username: str, email: str) -> bool:
        return any(
            u.username == username.lower() or u.email == email.lower()
            for u in self._users.values()
        )

    def add(self, user: User) -> User:
        if self.exists(user.username, user.email):
            raise UserAlreadyExistsError()
        new_user = User(
            id=self._seq,
            username=user.username.lower(),
            email=user.email.lower(),
            password_hash=user.password_hash,
            currency=user.currency,
            gender=user.gender,
            created_at=user.created_at,
            preferences=user.preferences,
            backup_code_hashes=user.backup_code_hashes,
        )
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user


def make_user(username: str = "alice", email: str = "alice@example.com", password: str = PASSWORD) -> User:
    return User(
        id=0,
        username=username,
        email=email,
        password_hash=DeterministicHasher().hash(password),
        currency=Currency.EUR,
        gender=Gender.FEMALE,
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        preferences=Preferences(),
    )


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
