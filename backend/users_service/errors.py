"""Global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from flask import Flask, Response, jsonify
from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from .api.locale import request_locale
from .exceptions import UserNotFound, UserValidationError
from .i18n import messages


def _field_errors(err: ValidationError) -> Dict[str, str]:
    locale = request_locale()
    errors: Dict[str, str] = {}
    for e in err.errors():
        field = ".".join(str(p) for p in e["loc"]) or "body"
        errors.setdefault(field, messages.get_message("Type.user.field", [e["msg"]], locale))
    return errors


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(UserNotFound)
    def user_not_found(err: UserNotFound):
        body = {
            "timestamp": datetime.now().isoformat(),
            "message": err.message,
            "status": "404 NOT_FOUND",
        }
        return jsonify(body), 404

    @app.errorhandler(UserValidationError)
    def invalid_user(err: UserValidationError):
        logger.debug("rejected user payload: {}", err.errors)
        return jsonify(err.errors), 400

    @app.errorhandler(ValidationError)
    def invalid_body(err: ValidationError):
        return jsonify(_field_errors(err)), 400

    @app.errorhandler(IntegrityError)
    def conflict(err: IntegrityError):
        logger.warning("store constraint violated: {}", err.orig)
        return jsonify({"error": "conflict", "message": "record violates a store constraint"}), 409

    @app.errorhandler(HTTPException)
    def http_error(err: HTTPException):
        name = (err.name or "error").lower().replace(" ", "_")
        return jsonify({"error": name, "message": err.description}), err.code or 500

    @app.errorhandler(Exception)
    def internal(err: Exception):  # type: ignore[override]
        logger.exception("unhandled error: {}", err)
        return jsonify({"error": "internal_server_error", "message": "unexpected error"}), 500


def ok(data: Any, status: int = 200):
    return jsonify(data), status


def no_content():
    return Response(status=204)
