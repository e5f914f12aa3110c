from __future__ import annotations

from functools import wraps
from typing import Any, Dict, Type

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CapacityExceededError,
    DomainError,
    InvalidStatusError,
    LastAdminError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR: Dict[Type[DomainError], int] = {
    ValidationError: 400,
    InvalidStatusError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
    LastAdminError: 409,
    CapacityExceededError: 422,
}


def error_response(code: str, message: str, status: int):
    return jsonify({"success": False, "code": code, "message": message}), status


def current_user_id() -> int:
    return int(session["user_id"])


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("unauthenticated", "Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def role_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return error_response("unauthenticated", "Please log in to continue", 401)
            if session.get("role") not in allowed:
                return error_response(AuthorizationError.code, "This action is unauthorized", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = STATUS_BY_ERROR.get(type(e), 400)
        return error_response(e.code, str(e), status)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return error_response(e.name.lower().replace(" ", "_"), e.description or e.name, e.code or 500)

        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return error_response("server_error", f"Internal error: {e}", 500)
        return error_response("server_error", "Internal server error", 500)
