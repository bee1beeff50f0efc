"""Exceptions raised by the account, project and gallery services."""

from typing import Optional


class StudioError(Exception):
    """Base error surfaced to the caller as a JSON error response."""

    status_code = 500
    default_message = 'Internal error'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class ValidationError(StudioError):
    """Request payload violates a field rule."""

    status_code = 400
    default_message = 'Invalid request'

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class Unauthorized(StudioError):
    """No identity could be resolved for the request."""

    status_code = 401
    default_message = 'Authentication required'


class Forbidden(StudioError):
    """Identity present but does not own the target row."""

    status_code = 403
    default_message = 'Access denied'


class NotFound(StudioError):
    """Target row does not exist."""

    status_code = 404
    default_message = 'Not found'


class Conflict(StudioError):
    """Write would duplicate a unique value, such as an account email."""

    status_code = 409
    default_message = 'Already exists'
