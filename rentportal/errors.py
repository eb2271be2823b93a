# rentportal/errors.py
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from .extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors

    def to_dict(self):
        body = {"success": False, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(ApiError):
    status_code = 400
    default_message = "Validation failed"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Not authorized"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Access denied"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ApiError):
    status_code = 409
    default_message = "Resource already exists"


class InternalError(ApiError):
    status_code = 500
    default_message = "Server error"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def _api_error(e):
        if e.status_code >= 500:
            logger.error("Request failed: %s", e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def _http_error(e):
        message = e.description if e.code == 400 else e.name
        return jsonify({"success": False, "message": message}), e.code

    @app.errorhandler(Exception)
    def _server_error(e):
        logger.exception("Unhandled exception: %s", e)
        db.session.rollback()
        return jsonify({"success": False, "message": InternalError.default_message}), 500
