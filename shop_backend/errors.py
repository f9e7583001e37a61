"""
API Errors

Every error a route can raise renders as ``{success: false, message, ...}``.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map straight onto a JSON response."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        self.errors = errors

    def to_dict(self):
        body = {'success': False, 'message': self.message}
        if self.errors is not None:
            body['errors'] = list(self.errors)
        return body


class ValidationError(ApiError):
    """Malformed request body; ``errors`` holds one message per bad field."""
    status_code = 400
    message = 'Validation failed'

    def __init__(self, errors, message=None):
        super().__init__(message, errors=errors)


class InvalidCredentials(ApiError):
    status_code = 401
    message = 'Invalid email or password'


class AccountDisabled(ApiError):
    status_code = 403
    message = 'Account is disabled. Please contact support.'


class AuthenticationRequired(ApiError):
    status_code = 401
    message = 'Authentication required'


class Forbidden(ApiError):
    status_code = 403
    message = 'Access denied'


class EmailAlreadyRegistered(ApiError):
    status_code = 400
    message = 'Email already registered'


class InternalFailure(ApiError):
    """Opaque server-side failure; details only go to the log."""
    status_code = 500


def register_error_handlers(app):
    """Render API errors and stray HTTP errors as JSON."""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        body = {'success': False, 'message': error.description or error.name}
        return jsonify(body), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled exception: %s', error)
        return jsonify({'success': False, 'message': 'Internal server error'}), 500
