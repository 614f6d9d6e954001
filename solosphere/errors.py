"""Error taxonomy and the Flask handlers that render it."""

from __future__ import annotations

from typing import Optional

from bson.errors import BSONError
from flask import Flask, current_app, jsonify
from pymongo.errors import PyMongoError

UNENCODABLE_DOCUMENT = "request body cannot be stored"


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = 400
    message = "bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        if message is not None:
            self.message = message

    def to_response(self):
        return jsonify(message=self.message), self.status_code


class BadRequest(ApiError):
    status_code = 400
    message = "bad request"


class Unauthorized(ApiError):
    status_code = 401
    message = "unauthorized access"


class Forbidden(ApiError):
    status_code = 403
    message = "forbidden access"


class DuplicateBid(ApiError):
    """Raised when a bidder has already bid on the job."""

    status_code = 400
    message = "You have already placed this job"

    def to_response(self):
        # Clients match on the plain-text body
        return self.message, self.status_code, {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app: Flask) -> None:
    """Map the error taxonomy and storage failures onto HTTP responses."""

    @app.errorhandler(ApiError)
    def _handle_api_error(error: ApiError):
        return error.to_response()

    @app.errorhandler(PyMongoError)
    def _handle_storage_error(error: PyMongoError):
        current_app.logger.exception(f"Database operation failed: {error}")
        return jsonify(message="internal server error"), 500

    @app.errorhandler(BSONError)
    @app.errorhandler(OverflowError)
    def _handle_unencodable_document(error: Exception):
        current_app.logger.info(f"Rejected document that cannot be encoded: {error}")
        return jsonify(message=UNENCODABLE_DOCUMENT), 400
