"""
User model - the accounts that own projects, posts and likes.
"""

import uuid
from datetime import datetime

from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from .database import db


def new_id():
    """Opaque primary key shared by every table."""
    return str(uuid.uuid4())


class User(UserMixin, db.Model):
    """Local email/password account."""

    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    last_login_at = db.Column(db.DateTime, nullable=True)

    projects = db.relationship('Project', backref='owner', lazy='dynamic')

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        """Public profile plus the caller's own counts. Never exposes password_hash."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'project_count': self.projects.count(),
            'post_count': len(self.posts),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'last_login_at': self.last_login_at.isoformat() if self.last_login_at else None,
        }
