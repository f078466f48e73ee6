# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from jaldrishti.shared.config import DatabaseConfig
from jaldrishti.shared.errors import StorageUnavailableError
from jaldrishti.shared.logging import logger

# Driver-level faults (unreachable server, lock/busy timeout, pool exhaustion).
_UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError)


class Base(DeclarativeBase):
    pass


def _engine_options(config: DatabaseConfig) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": False, "pool_pre_ping": True}
    if config.is_sqlite():
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": config.pool_timeout,
        }
        if config.url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        connect_args={"connect_timeout": config.connect_timeout},
    )
    return options


class Database:
    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = create_engine(config.url, **_engine_options(config))
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self.session_factory()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except _UNAVAILABLE_ERRORS as exc:
            session.rollback()
            logger.error(f"db.session: storage unavailable ({type(exc).__name__})")
            raise StorageUnavailableError() from exc
        except Exception:
            logger.debug("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self) -> None:
        # Importing registers the mapped tables on Base.metadata.
        from jaldrishti.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def ping(self) -> None:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except _UNAVAILABLE_ERRORS as exc:
            raise StorageUnavailableError() from exc

    def dispose(self) -> None:
        self.engine.dispose()
