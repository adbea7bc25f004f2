from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import wraps

from flask import Flask, g, jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    DataAccessError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (DataAccessError, 502),
)


def status_for(exc: DomainError) -> int:
    for kind, code in _STATUS_BY_ERROR:
        if isinstance(exc, kind):
            return code
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        return jsonify({"success": False, "error": str(exc)}), status_for(exc)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        # HTTP errors raised by Flask itself keep their own response.
        code = getattr(exc, "code", None)
        if isinstance(code, int):
            return jsonify({"success": False, "error": getattr(exc, "description", str(exc))}), code

        logger.exception("Unhandled error")
        if app.config.get("DEBUG"):
            return jsonify({"success": False, "error": f"Internal error: {exc}"}), 500
        return jsonify({"success": False, "error": "Internal error"}), 500


def login_required(container):
    """Resolve the signed-in staff member into ``g.portal`` or answer 401."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user_id = session.get("user_id")
            if user_id is None:
                raise AuthenticationError("Please sign in to continue")
            g.portal = container.auth_service.resolve_session(int(user_id))
            return view(*args, **kwargs)

        return wrapper

    return decorator


def int_arg(name: str):
    """Optional integer query-string argument."""
    value = request.args.get(name)
    if value in (None, ""):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def json_payload() -> Mapping:
    """Request body as a mapping; form data when no JSON was sent."""
    payload = request.get_json(silent=True)
    if payload is None:
        return request.form
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return payload
