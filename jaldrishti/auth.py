# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from collections.abc import Callable
from functools import wraps

from flask import g, request

from jaldrishti.application.use_cases.users.check_session import CheckSessionUseCase
from jaldrishti.infrastructure.audit import AuditAction, audit_log
from jaldrishti.shared.errors import UnauthorizedError
from jaldrishti.shared.logging import logger


def client_ip() -> str | None:
    """Peer address; forwarded headers are honoured only through ProxyFix."""
    return request.remote_addr


def session_token(cookie_name: str) -> str:
    token = request.cookies.get(cookie_name, "")
    if not token:
        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            token = auth[7:].strip()
    return token


def current_user_id() -> int:
    """Return the user id attached by :func:`require_session`."""
    return g.user_id


def require_session(check_session: CheckSessionUseCase, *, cookie_name: str):
    """Reject the request with a uniform 401 unless it carries a valid session.

    The rejection reason (no token, bad signature, expired) is only logged.
    """

    def decorator(f: Callable):
        @wraps(f)
        def inner(*a, **kw):
            result = check_session.execute(session_token(cookie_name))
            if not result.ok:
                logger.warning(
                    f"auth.gate: rejected reason={result.status.value} "
                    f"on {request.method} {request.path} from {client_ip()}"
                )
                audit_log(
                    AuditAction.SESSION_REJECTED,
                    ip_address=client_ip(),
                    details={"reason": result.status.value, "path": request.path},
                    success=False,
                )
                raise UnauthorizedError()

            g.user_id = result.user_id
            logger.debug(f"auth.gate: ok user={result.user_id} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator
