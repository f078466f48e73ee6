# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import cached_property

from jaldrishti.application.services.password_hashing import WerkzeugPasswordHasher
from jaldrishti.application.services.session_tokens import SignedSessionTokens
from jaldrishti.application.use_cases.users.check_session import (
    CheckSessionUseCase,
    GetCurrentUserUseCase,
)
from jaldrishti.application.use_cases.users.login_user import LoginUserUseCase
from jaldrishti.application.use_cases.users.logout_user import LogoutUserUseCase
from jaldrishti.application.use_cases.users.register_user import RegisterUserUseCase
from jaldrishti.infrastructure.db import Database
from jaldrishti.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from jaldrishti.interfaces.http.controllers.auth_controller import AuthController
from jaldrishti.interfaces.http.controllers.misc_controller import MiscController
from jaldrishti.shared.config import AppConfig
from jaldrishti.shared.logging import logger


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self._closed = False

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def hash_executor(self) -> ThreadPoolExecutor:
        return ThreadPoolExecutor(
            max_workers=self.config.security.hash_workers,
            thread_name_prefix="password-hash",
        )

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self.config.security.password_hash_method,
            executor=self.hash_executor,
            timeout=self.config.security.hash_timeout,
        )

    @cached_property
    def session_tokens(self) -> SignedSessionTokens:
        return SignedSessionTokens(
            self.config.secret_key,
            ttl_seconds=self.config.security.session_ttl,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase()

    @cached_property
    def check_session_use_case(self) -> CheckSessionUseCase:
        return CheckSessionUseCase(verifier=self.session_tokens)

    @cached_property
    def current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            check_session_use_case=self.check_session_use_case,
            current_user_use_case=self.current_user_use_case,
            security=self.config.security,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if "hash_executor" in self.__dict__:
            self.hash_executor.shutdown(wait=False, cancel_futures=True)
        if "database" in self.__dict__:
            self.database.dispose()
        logger.info("container: closed")
