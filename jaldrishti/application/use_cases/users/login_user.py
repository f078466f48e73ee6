# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

import secrets

from jaldrishti.domain.users.entities import normalize_handle
from jaldrishti.domain.users.exceptions import InvalidCredentialsError
from jaldrishti.domain.users.repositories import (
    PasswordHasher,
    SessionTokenIssuer,
    UserRepository,
)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        # Built up front so the first unknown-handle login costs one verify,
        # like every other failed login.
        self._dummy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, handle: str, password: str) -> tuple[int, str]:
        user = self._users.find_by_handle(normalize_handle(handle))

        if user is None:
            # Spend the same hashing work as a real check so response time
            # does not reveal whether the handle exists.
            self._password_hasher.verify(password, self._dummy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return user.id, self._tokens.issue(user.id)
