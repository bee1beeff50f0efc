"""
Project model - a user's saved creative work.
"""

from datetime import datetime

from .database import db
from .user import new_id


class Project(db.Model):
    """Video, song or album-cover configuration owned by one user."""

    __tablename__ = 'projects'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    owner_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    type = db.Column(db.String(20), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(1000), nullable=True)
    data = db.Column(db.Text, nullable=False)
    thumbnail = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self):
        """Serialize project for API responses."""
        return {
            'id': self.id,
            'owner_id': self.owner_id,
            'type': self.type,
            'title': self.title,
            'description': self.description,
            'data': self.data,
            'thumbnail': self.thumbnail,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
