# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from jaldrishti.infrastructure.db import Database


def check_database(database: Database) -> bool:
    database.ping()
    return True


__all__ = ["check_database"]
