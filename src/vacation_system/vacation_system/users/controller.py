from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "")

    @app.route(f"{prefix}/users", methods=["GET"], endpoint="list_users")
    def list_users():
        try:
            users = container.user_service.list_users()
        except Exception:
            logger.exception("Error fetching users")
            return error_response("Failed to fetch users", 500)
        return jsonify([{"id": u.user_id, "name": u.name, "role": u.role.value} for u in users])
