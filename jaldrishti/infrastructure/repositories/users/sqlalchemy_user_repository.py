# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from jaldrishti.domain.users.entities import User as DomainUser
from jaldrishti.domain.users.exceptions import DuplicateHandleError
from jaldrishti.domain.users.repositories import UserRepository
from jaldrishti.infrastructure.db.models import User
from jaldrishti.infrastructure.db.session import Database
from jaldrishti.shared.logging import logger


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        handle=row.handle,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def find_by_handle(self, handle: str) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.scalars(select(User).where(User.handle == handle)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with self._database.session_scope() as session:
            row = User(
                handle=user.handle,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                logger.info(f"users.add: unique constraint rejected handle={user.handle}")
                raise DuplicateHandleError() from exc
            session.refresh(row)
            return _to_domain(row)

    def count_by_handle(self, handle: str) -> int:
        with self._database.session_scope() as session:
            return int(
                session.scalar(select(func.count()).select_from(User).where(User.handle == handle))
                or 0
            )
