from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from account_service.app import create_app
from account_service.container import AppContext, build_context
from account_service.domain.users.entities import User
from account_service.infrastructure.db import Database
from account_service.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from account_service.infrastructure.sessions import InMemorySessionStore
from account_service.shared.config import AppConfig

from .support import SIGNING_KEY, DeterministicHasher, FakeClock, make_user


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        token_signing_key=SIGNING_KEY,
        token_ttl_seconds=5,
        database_url="sqlite://",
        redis_url="memory://",
        host="127.0.0.1",
        port=3000,
        registration_requires_auth=True,
        allowed_origins=["*"],
        _env_file=None,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def database() -> Iterator[Database]:
    db = Database.from_url("sqlite://")
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture()
def users(database: Database) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(database)


@pytest.fixture()
def sessions(clock: FakeClock) -> InMemorySessionStore:
    return InMemorySessionStore(clock=clock)


@pytest.fixture()
def context(
    config: AppConfig,
    database: Database,
    users: SqlAlchemyUserRepository,
    sessions: InMemorySessionStore,
    clock: FakeClock,
) -> AppContext:
    return build_context(
        config,
        database=database,
        users=users,
        sessions=sessions,
        password_hasher=DeterministicHasher(),
        clock=clock,
    )


@pytest.fixture()
def alice(users: SqlAlchemyUserRepository) -> User:
    return users.add(make_user())


@pytest.fixture()
def flask_app(context: AppContext) -> Flask:
    app = create_app(context)
    app.testing = True
    return app


@pytest.fixture()
def client(flask_app: Flask) -> Iterator[FlaskClient]:
    with flask_app.test_client() as test_client:
        yield test_client
