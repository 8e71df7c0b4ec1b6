from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, TypeVar

from flask import Flask, current_app, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..users.model import User

logger = logging.getLogger(__name__)

T = TypeVar("T")


def current_user() -> User:
    """The stored user behind the session cookie.

    The cookie only carries the id: role and existence are read from the
    store on every request, so a deleted user's session stops working and a
    role change takes effect at once.
    """
    user_id = session.get("user_id")
    if not user_id:
        raise AuthenticationError("Please log in to continue")
    container = current_app.extensions["time_tracker"]
    user = container.user_service.get_user(str(user_id))
    if not user:
        session.clear()
        raise AuthenticationError("Session user no longer exists")
    return user


def current_user_id() -> str:
    return current_user().user_id


def is_admin_session() -> bool:
    return current_user().role == Role.ADMIN


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        current_user()
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not is_admin_session():
            raise AuthorizationError("Admin access required")
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_entity(parser: Callable[[dict], T], data: dict[str, Any]) -> T:
    """Run a snapshot decoder on request data, reporting bad input as 400."""
    try:
        return parser(data)
    except KeyError as e:
        raise ValidationError(f"Missing field: {e.args[0]}")
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e))


def error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return error(str(e), 403)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return error(f"Internal error: {e}", 500)
        return error("Internal error", 500)
