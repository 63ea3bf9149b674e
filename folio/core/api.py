"""
Response envelope and error wrapping shared by every API route.

Every JSON response is {"data": ..., "error": ...}; "error" is only present
on failures.
"""

from functools import wraps

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .database import db
from .errors import ApiError, MethodNotAllowed, ValidationError
from .logging_service import LoggingService
from .validation import validate


def api_response(data=None, error=None, status=200):
    body = {'data': data}
    if error is not None:
        body['error'] = error
    return jsonify(body), status


def error_response(error):
    return api_response(None, error.message, error.status_code)


def _unexpected_message(error):
    if current_app.config.get('FOLIO_EXPOSE_ERRORS'):
        return str(error) or type(error).__name__
    return 'Internal server error'


def with_error_handler(f):
    """
    Decorator for API views: ApiError becomes its status, anything else a
    logged 500. The session is rolled back before logging so nothing half
    written survives the request.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ApiError as e:
            db.session.rollback()
            return error_response(e)
        except HTTPException:
            raise
        except Exception as e:
            db.session.rollback()
            LoggingService.log_error_with_traceback('api', e, {
                'endpoint': request.endpoint,
                'method': request.method,
                'path': request.path,
            })
            return api_response(None, _unexpected_message(e), 500)

    return decorated_function


def parse_request_body(schema):
    """Decode the JSON body and validate it against a pydantic schema."""
    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError('Invalid JSON in request body')
    return validate(schema, payload)


def register_error_handlers(app):
    """JSON envelopes for routing errors (unknown URL, wrong verb) under /api."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if not request.path.startswith('/api/'):
            return e
        if e.code == 405:
            return error_response(MethodNotAllowed(f"Method {request.method} not allowed"))
        return api_response(None, e.name, e.code)
