# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from enum import Enum
from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


class ValidationErrorType(str, Enum):
    MISSING = "missing"
    HANDLE_INVALID = "handle_invalid"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_BLANK = "password_blank"


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        # Input values are never echoed back.
        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
                "message": error.get("msg", ""),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    first = context["errors"][0]["message"] if context["errors"] else "Invalid request"
    raise ValidationError(message=first, context=context) from exc


__all__ = [
    "ValidationErrorType",
    "format_pydantic_errors",
    "raise_validation_error",
]
