# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from .settings import AppConfig, DatabaseConfig, SecurityConfig, load_config

__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
