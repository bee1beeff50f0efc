"""
Models package for Studio.
"""

from .database import db, init_db
from .user import User, new_id
from .project import Project
from .post import Post
from .like import Like
from .audit_log import AuditLog, log_action

__all__ = [
    'db', 'init_db', 'User', 'new_id', 'Project', 'Post', 'Like',
    'AuditLog', 'log_action',
]
