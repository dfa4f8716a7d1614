from flask import jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError
import logging

from models.schemas.common import flatten_errors

logger = logging.getLogger(__name__)

# Kind reported for plain werkzeug errors (unknown routes, wrong method, ...)
KIND_BY_STATUS = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    415: "UNSUPPORTED_MEDIA_TYPE",
    500: "INTERNAL_ERROR",
}


class ApiError(HTTPException):
    """HTTPException carrying the short error kind and optional field details."""

    code = 400
    error = "BAD_REQUEST"
    description = "Bad request"

    def __init__(self, description: str | None = None, details: list | None = None):
        super().__init__(description)
        self.details = details


class ValidationFailed(ApiError):
    code = 400
    error = "VALIDATION_FAILED"
    description = "Validation failed"


class InvalidIdentifier(ApiError):
    code = 400
    error = "INVALID_IDENTIFIER"
    description = "Invalid identifier"


class AuthenticationFailed(ApiError):
    code = 401
    error = "UNAUTHORIZED"
    description = "Authentication required"


class NotFound(ApiError):
    code = 404
    error = "NOT_FOUND"
    description = "Resource not found"


class Conflict(ApiError):
    code = 409
    error = "CONFLICT"
    description = "Conflict"


class InternalError(ApiError):
    code = 500
    error = "INTERNAL_ERROR"
    description = "An unexpected error occurred"


def error_response(error: str, message: str, status: int, details: list | None = None):
    payload = {"error": error, "message": message, "status": status}
    if details:
        payload["details"] = details
    return jsonify(payload), status


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        if err.code >= 500:
            logger.error("Request failed: %s", err.description)
        return error_response(err.error, err.description, err.code, details=err.details)

    # Schema errors that escaped a handler still get the validation envelope
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return error_response("VALIDATION_FAILED", "Validation failed", 400, details=flatten_errors(err.messages))

    # Unique constraint violations not already translated by a handler
    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        lower_msg = str(getattr(err, "orig", err)).lower()
        if "unique" in lower_msg or "duplicate" in lower_msg:
            logger.warning("Unique constraint violated: %s", lower_msg)
            return error_response("CONFLICT", "Duplicate entry", 409)
        logger.exception("Integrity error", exc_info=err)
        return error_response(InternalError.error, InternalError.description, InternalError.code)

    # Werkzeug HTTPExceptions map to their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        code = err.code or 500
        return error_response(KIND_BY_STATUS.get(code, "BAD_REQUEST"), err.description, code)

    # 500 Internal Error (catch-all); never echo internals to the caller
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logger.exception("Unhandled exception", exc_info=err)
        return error_response(InternalError.error, InternalError.description, InternalError.code)
