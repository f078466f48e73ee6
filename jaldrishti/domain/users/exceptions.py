# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from http import HTTPStatus

from jaldrishti.shared.errors.base import DomainError


class DuplicateHandleError(DomainError):
    code = "duplicate_handle"
    status = HTTPStatus.CONFLICT
    message = "An account with this email already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"
