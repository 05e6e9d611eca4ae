"""SQLAlchemy engine/session initialization and lifecycle management."""
from __future__ import annotations

from typing import Any, Dict

from flask import Flask
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from .base import Base


def _engine_options(app: Flask, url: str) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": app.config.get("SQL_ECHO", False), "future": True}
    if make_url(url).get_backend_name() == "sqlite":
        # one shared connection, so an in-memory database survives across sessions
        options.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
    else:
        options.update(
            pool_pre_ping=True,
            pool_size=app.config.get("POOL_SIZE", 10),
            max_overflow=app.config.get("MAX_OVERFLOW", 20),
        )
    return options


class Database:
    def __init__(self) -> None:
        self.engine = None
        self.Session = None  # type: ignore[assignment]

    def init_app(self, app: Flask) -> None:
        url: str = app.config["DATABASE_URL"]

        self.engine = create_engine(url, **_engine_options(app, url))
        self.Session = scoped_session(
            sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False, future=True)
        )
        logger.info("database engine ready: {}", make_url(url).render_as_string(hide_password=True))

        if app.config.get("CREATE_TABLES", False):
            self.create_all()

        @app.teardown_appcontext
        def remove_session(_: object | None) -> None:
            if self.Session is not None:
                self.Session.remove()

    def create_all(self) -> None:
        from .models import user  # noqa: F401

        assert self.engine is not None, "DB engine is not initialized"
        Base.metadata.create_all(self.engine)
        logger.info("database tables created")


db = Database()
