from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Any

from flask import jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .datetime_utils import parse_iso_date
from .validators import require_int

logger = logging.getLogger(__name__)

# Most specific first.
_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (StoreError, 500),
)


def json_ok(data: Any = None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def json_error(error: DomainError):
    status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(error, cls)), 400)
    payload = {"success": False, "error": type(error).__name__, "message": str(error)}
    if isinstance(error, NotFoundError):
        payload["entity"] = error.entity_kind.value
    if status >= 500:
        # Driver details stay in the log.
        logger.error("Store failure on %s %s: %s", request.method, request.path, error)
        payload["message"] = "Database error"
    return jsonify(payload), status


def teacher_required(view):
    """Allow only a logged-in teacher (session set by /api/auth/login)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "teacher_id" not in session:
            return json_error(AuthenticationError("Login required"))
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def query_date(name: str) -> date:
    value = request.args.get(name)
    if not value:
        raise ValidationError(f"Query parameter '{name}' is required")
    return parse_iso_date(value)


def query_int(name: str) -> int:
    value = request.args.get(name)
    if value is None or value == "":
        raise ValidationError(f"Query parameter '{name}' is required")
    return require_int(value, name)
