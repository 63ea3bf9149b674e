"""
API error taxonomy.

Every handler failure that the caller should see is one of these. Anything
else is treated as unexpected and becomes a 500 in core.api.
"""


class ApiError(Exception):
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Invalid request'


class Unauthorized(ApiError):
    status_code = 401
    default_message = 'Unauthorized'


class Forbidden(ApiError):
    status_code = 403
    default_message = 'Forbidden'


class NotFound(ApiError):
    """Absent, or hidden from the caller by the visibility rule."""
    status_code = 404
    default_message = 'Not found'


class MethodNotAllowed(ApiError):
    status_code = 405
    default_message = 'Method not allowed'


class Conflict(ApiError):
    status_code = 409
    default_message = 'Resource already exists'
