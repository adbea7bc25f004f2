from __future__ import annotations

import logging

from flask import Flask, g, jsonify, session

from ..common.http import json_payload, login_required
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        payload = json_payload()
        email = payload.get("email", "")
        password = payload.get("password", "")

        user = container.auth_service.authenticate(email, password)
        portal = container.auth_service.resolve_session(user.user_id)

        session.clear()
        session["user_id"] = user.user_id
        return jsonify({"success": True, "session": portal.to_dict()}), 200

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        user_id = session.pop("user_id", None)
        session.clear()
        if user_id is not None:
            logger.info("User %s signed out", user_id)
        return jsonify({"success": True}), 200

    @app.route("/api/auth/session", methods=["GET"], endpoint="current_session")
    @login_required(container)
    def current_session():
        return jsonify({"success": True, "session": g.portal.to_dict()}), 200
