"""
Account Service - registration and credential checks for the session identity.

The routes turn a returned User into a Flask-Login session; nothing here
touches the request or the session.
"""

import logging
import re
from datetime import datetime

from app.exceptions import Conflict, Forbidden, Unauthorized, ValidationError
from app.models import db, User

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 8


def normalize_email(value) -> str:
    return str(value or '').strip().lower()


class AccountService:
    """Local accounts keyed by normalized email."""

    def register(self, name, email, password, confirm_password) -> User:
        """Create an account and stamp it as logged in."""
        name = str(name or '').strip()
        email = normalize_email(email)
        password = str(password or '')

        if not name:
            raise ValidationError('Name is required', field='name')
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError('Name is too long', field='name')
        if not EMAIL_PATTERN.match(email):
            raise ValidationError('Valid email is required', field='email')
        if len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f'Password must be at least {PASSWORD_MIN_LENGTH} characters', field='password'
            )
        if password != str(confirm_password or ''):
            raise ValidationError('Passwords do not match', field='confirm_password')
        if User.query.filter_by(email=email).first():
            raise Conflict('Email already registered')

        user = User(name=name, email=email, last_login_at=datetime.utcnow())
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        logger.info('Account %s registered', user.id)
        return user

    def authenticate(self, email, password) -> User:
        """Return the active account matching the credentials."""
        email = normalize_email(email)
        password = str(password or '')
        if not email or not password:
            raise ValidationError('Email and password are required')

        user = User.query.filter_by(email=email).first()
        if not user or not user.check_password(password):
            raise Unauthorized('Invalid email or password')
        if not user.is_active:
            raise Forbidden('Account is disabled')

        user.last_login_at = datetime.utcnow()
        db.session.commit()
        return user

    def upsert(self, email, password, name='Studio User'):
        """Create or reset an account without the signup checks. Returns (user, created)."""
        email = normalize_email(email)
        user = User.query.filter_by(email=email).first()
        created = user is None
        if created:
            user = User(name=name, email=email)
            db.session.add(user)
        user.set_password(password)
        user.is_active = True
        db.session.commit()
        return user, created


# Singleton instance
account_service = AccountService()
