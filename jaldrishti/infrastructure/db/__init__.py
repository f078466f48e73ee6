# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from .session import Base, Database

__all__ = ["Base", "Database"]
