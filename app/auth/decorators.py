"""
Auth decorators that thread the request identity into handlers.
"""

from functools import wraps

from flask_login import current_user

from app.exceptions import Unauthorized


def requester_id():
    """Return the authenticated user's id for this request, or None."""
    if current_user and current_user.is_authenticated:
        return current_user.id
    return None


def with_identity(f):
    """
    Decorator that resolves the caller's identity and passes it as the
    ``requester_id`` keyword argument.

    Fails with Unauthorized before the handler runs when no identity is
    resolved, so no store access happens for anonymous callers.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        user_id = requester_id()
        if user_id is None:
            raise Unauthorized()
        return f(*args, requester_id=user_id, **kwargs)
    return decorated
