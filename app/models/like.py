"""
Like model - tracks which users liked which posts.
"""

from datetime import datetime

from .database import db
from .user import new_id


class Like(db.Model):
    """User's like on a post. Existence of the row is the toggle state."""

    __tablename__ = 'likes'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'post_id', name='uq_post_like'),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(
        db.String(36),
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    post_id = db.Column(
        db.String(36),
        db.ForeignKey('posts.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
