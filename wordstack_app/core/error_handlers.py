"""
Error Handlers for WordStack

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from werkzeug.exceptions import HTTPException
from typing import Optional


class WordStackError(Exception):
    """Base exception class for WordStack."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        error: Optional[str] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        # Underlying failure description, for diagnostics only.
        self.error = error
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        payload = {
            'success': False,
            'message': self.message,
            'code': self.code,
        }
        if self.error:
            payload['error'] = self.error
        return payload


class InvalidRequestError(WordStackError):
    """Required request fields are missing or invalid."""

    def __init__(self, message: str = 'Invalid request', error: Optional[str] = None):
        super().__init__(message, code='INVALID_REQUEST', status_code=400, error=error)


class NotFoundError(WordStackError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', error: Optional[str] = None):
        super().__init__(message, code='NOT_FOUND', status_code=404, error=error)


class DuplicateWordError(WordStackError):
    """The word is already in the deck."""

    def __init__(self, message: str = 'This word has already been added.', error: Optional[str] = None):
        super().__init__(message, code='DUPLICATE_WORD', status_code=409, error=error)


class EmptyGenerationError(WordStackError):
    """The generator returned nothing usable."""

    def __init__(self, message: str = 'The AI did not return any valid sentences.', error: Optional[str] = None):
        super().__init__(message, code='EMPTY_GENERATION', status_code=500, error=error)


class MalformedGenerationError(WordStackError):
    """The generator output did not follow the requested format."""

    def __init__(self, message: str = 'The AI did not return the expected format.', error: Optional[str] = None):
        super().__init__(message, code='MALFORMED_GENERATION', status_code=500, error=error)


class GenerationError(WordStackError):
    """The text generation service failed."""

    def __init__(self, message: str = 'Text generation failed.', error: Optional[str] = None):
        super().__init__(message, code='GENERATION_FAILED', status_code=500, error=error)


class StorageError(WordStackError):
    """Any other database failure."""

    def __init__(self, message: str = 'Database operation failed.', error: Optional[str] = None):
        super().__init__(message, code='STORAGE_FAILURE', status_code=500, error=error)


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    error: Optional[str] = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if error:
        response['error'] = error

    return jsonify(response), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(WordStackError)
    def handle_wordstack_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message} ({error.error})")
        else:
            current_app.logger.info(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        return error_response('Endpoint not found', 'NOT_FOUND', 404)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        code = error.name.upper().replace(' ', '_')
        return error_response(error.description or error.name, code, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception('Unhandled error on %s %s', request.method, request.path)
        return error_response('Internal server error', 'SERVER_ERROR', 500, error=str(error))
