# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from flask import Blueprint, jsonify

from jaldrishti.infrastructure.db import Database
from jaldrishti.infrastructure.health import check_database
from jaldrishti.shared.errors import StorageUnavailableError


class MiscController:
    def __init__(self, *, database: Database) -> None:
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return "API is running..."

    def health(self):
        try:
            check_database(self._database)
        except StorageUnavailableError:
            return jsonify({"success": False, "database": "unavailable"}), 503
        return jsonify({"success": True, "database": "ok"}), 200
