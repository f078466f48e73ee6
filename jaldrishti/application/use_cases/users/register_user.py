# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from datetime import UTC, datetime

from jaldrishti.domain.users.entities import User, normalize_handle
from jaldrishti.domain.users.exceptions import DuplicateHandleError
from jaldrishti.domain.users.repositories import PasswordHasher, UserRepository
from jaldrishti.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, handle: str, password: str) -> User:
        handle = normalize_handle(handle)
        if self._users.find_by_handle(handle):
            logger.info(f"auth.register: duplicate handle={handle}")
            raise DuplicateHandleError()
        hashed = self._password_hasher.hash(password)
        user = User(id=0, handle=handle, password_hash=hashed, created_at=datetime.now(UTC))
        # A concurrent registration may still win; the store's unique index
        # turns that into DuplicateHandleError.
        return self._users.add(user)
