"""
Post model - a published, publicly listed project.
"""

from datetime import datetime

from .database import db
from .user import new_id


class Post(db.Model):
    """Gallery entry with like and play counters."""

    __tablename__ = 'posts'
    __table_args__ = (
        db.CheckConstraint('likes >= 0', name='ck_post_likes_non_negative'),
        db.CheckConstraint('plays >= 0', name='ck_post_plays_non_negative'),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    owner_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    # Not a foreign key: posts outlive the project they were published from
    project_id = db.Column(db.String(36), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(1000), nullable=True)
    thumbnail = db.Column(db.Text, nullable=True)
    media_url = db.Column(db.Text, nullable=True)
    likes = db.Column(db.Integer, default=0, nullable=False)
    plays = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    owner = db.relationship('User', backref='posts')

    def to_dict(self):
        """Serialize post for API responses."""
        return {
            'id': self.id,
            'owner_id': self.owner_id,
            'owner_name': self.owner.name if self.owner else None,
            'project_id': self.project_id,
            'title': self.title,
            'description': self.description,
            'thumbnail': self.thumbnail,
            'media_url': self.media_url,
            'likes': self.likes,
            'plays': self.plays,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
