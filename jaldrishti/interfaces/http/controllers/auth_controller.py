# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from jaldrishti.application.use_cases.users.check_session import (
    CheckSessionUseCase,
    GetCurrentUserUseCase,
)
from jaldrishti.application.use_cases.users.login_user import LoginUserUseCase
from jaldrishti.application.use_cases.users.logout_user import LogoutUserUseCase
from jaldrishti.application.use_cases.users.register_user import RegisterUserUseCase
from jaldrishti.auth import client_ip, current_user_id, require_session
from jaldrishti.domain.users.exceptions import DuplicateHandleError, InvalidCredentialsError
from jaldrishti.infrastructure.audit import AuditAction, audit_log
from jaldrishti.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    SessionDTO,
)
from jaldrishti.shared.config import SecurityConfig
from jaldrishti.shared.errors.validation import raise_validation_error
from jaldrishti.shared.logging import logger
from jaldrishti.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        check_session_use_case: CheckSessionUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._check_session_use_case = check_session_use_case
        self._current_user_use_case = current_user_use_case
        self._security = security

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user = self._register_use_case.execute(dto.email, dto.password)
        except DuplicateHandleError:
            audit_log(
                AuditAction.REGISTER_FAILED,
                ip_address=client_ip(),
                details={"handle": dto.email, "reason": "duplicate_handle"},
                success=False,
            )
            raise

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(),
            details={"handle": user.handle},
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(AuthSuccessDTO().model_dump()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip()

        try:
            user_id, token = self._login_use_case.execute(dto.email, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"handle": dto.email},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user_id,
            ip_address=ip_address,
            details={"handle": dto.email},
            success=True,
        )

        response = jsonify(AuthSuccessDTO().model_dump())
        response.set_cookie(
            self._security.cookie_name,
            token,
            max_age=self._security.session_ttl,
            path="/",
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        logger.info(f"auth.login: ok user_id={user_id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        user_id = current_user_id()
        self._logout_use_case.execute(user_id)

        audit_log(AuditAction.LOGOUT, user_id=user_id, ip_address=client_ip(), success=True)

        response = jsonify(AuthSuccessDTO().model_dump())
        response.delete_cookie(
            self._security.cookie_name,
            path="/",
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        return response, 200

    def is_auth(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(current_user_id())
        payload = SessionDTO(user_identity=user.id, email=user.handle).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        gate = require_session(
            self._check_session_use_case, cookie_name=self._security.cookie_name
        )
        bp = Blueprint("user", __name__, url_prefix="/api/user")
        bp.add_url_rule(
            "/register",
            view_func=rate_limit(self._security, limit=5)(self.register),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/login",
            view_func=rate_limit(self._security)(self.login),
            methods=["POST"],
        )
        bp.add_url_rule("/logout", view_func=gate(self.logout), methods=["GET"])
        bp.add_url_rule("/is-auth", view_func=gate(self.is_auth), methods=["GET"])
        return bp
