"""Field validation and request helpers shared by the services and routes."""

from datetime import datetime, timedelta
from typing import Optional

from flask import request

from config import config
from app.exceptions import ValidationError


def validate_title(value) -> str:
    """Title must be a string of 1 to TITLE_MAX_LENGTH characters."""
    if value is None:
        raise ValidationError('Title is required', field='title')
    if not isinstance(value, str):
        raise ValidationError('Title must be a string', field='title')
    if len(value) < 1:
        raise ValidationError('Title is required', field='title')
    if len(value) > config.TITLE_MAX_LENGTH:
        raise ValidationError(
            f'Title must be at most {config.TITLE_MAX_LENGTH} characters', field='title'
        )
    return value


def validate_description(value) -> Optional[str]:
    """Description is optional; empty or null clears it."""
    value = optional_text(value, 'description')
    if value is not None and len(value) > config.DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f'Description must be at most {config.DESCRIPTION_MAX_LENGTH} characters',
            field='description',
        )
    return value


def validate_project_type(value) -> str:
    """Project type must be one of the configured kinds."""
    if value not in config.PROJECT_TYPES:
        allowed = ', '.join(config.PROJECT_TYPES)
        raise ValidationError(f'Project type must be one of: {allowed}', field='type')
    return value


def require_text(value, field: str) -> str:
    """Opaque string field that must be present. Content is not inspected."""
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string', field=field)
    return value


def optional_text(value, field: str) -> Optional[str]:
    """Opaque optional string. None and '' both mean 'no value'."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string', field=field)
    return value or None


def advance_timestamp(previous: Optional[datetime]) -> datetime:
    """Return now, nudged forward so it is strictly later than previous."""
    now = datetime.utcnow()
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


def json_body() -> dict:
    """Return the request's JSON object body or fail with ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data
