from __future__ import annotations

from typing import Any, Dict

from flask import jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (InvalidTransitionError, 409),
)


def json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def error_response(message: str, status_code: int):
    return jsonify({"error": message}), status_code


def domain_error_response(e: DomainError):
    """Domain errors are client-facing: their message is returned as is."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(e, error_type):
            return error_response(str(e), status_code)
    return error_response(str(e), 400)
