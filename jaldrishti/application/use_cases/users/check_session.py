# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from jaldrishti.domain.users.entities import SessionCheck, User
from jaldrishti.domain.users.repositories import SessionTokenVerifier, UserRepository
from jaldrishti.shared.errors import UnauthorizedError


class CheckSessionUseCase:
    def __init__(self, *, verifier: SessionTokenVerifier) -> None:
        self._verifier = verifier

    def execute(self, token: str | None) -> SessionCheck:
        return self._verifier.verify(token)


class GetCurrentUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UnauthorizedError()
        return user
