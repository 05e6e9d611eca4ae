"""Shared fixtures: in-memory SQLite store, Flask app and test client.

Every test gets a fresh database; nothing touches a real PostgreSQL server.
"""
from __future__ import annotations

from dataclasses import dataclass

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from users_service import create_app
from users_service.config import BaseConfig
from users_service.db.base import Base
from users_service.db.models import user as _user_model  # noqa: F401
from users_service.domain.user import User


@dataclass
class TestConfig(BaseConfig):
    __test__ = False

    DATABASE_URL: str = "sqlite+pysqlite:///:memory:"
    CREATE_TABLES: bool = True
    DEFAULT_LOCALE: str = "en"
    LOG_LEVEL: str = "WARNING"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine, expire_on_commit=False, autoflush=False) as s:
        yield s


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    from users_service.db.session import db

    db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user():
    def _make(**overrides) -> User:
        fields = {
            "full_name": "Alice Liddell",
            "phone": "111",
            "email": "alice@mail.com",
            "password": "s3cret",
        }
        fields.update(overrides)
        return User(**fields)

    return _make
