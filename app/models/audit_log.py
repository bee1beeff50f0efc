"""
Audit log model for tracking destructive and publishing actions.
"""

import json
from datetime import datetime

from flask import request as flask_request

from .database import db


class AuditLog(db.Model):
    """Records project deletion and gallery publishing actions."""

    __tablename__ = 'audit_logs'

    id = db.Column(db.Integer, primary_key=True)
    actor_user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=True, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)
    target_type = db.Column(db.String(30), nullable=True)
    target_id = db.Column(db.String(50), nullable=True)
    metadata_json = db.Column(db.Text, nullable=True)
    ip_address = db.Column(db.String(45), nullable=True)
    user_agent = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        """Serialize for API responses."""
        return {
            'id': self.id,
            'actor_user_id': self.actor_user_id,
            'action': self.action,
            'target_type': self.target_type,
            'target_id': self.target_id,
            'metadata': json.loads(self.metadata_json) if self.metadata_json else None,
            'ip_address': self.ip_address,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


def log_action(action, actor_id=None, target_type=None, target_id=None, metadata=None):
    """
    Stage an audit log entry in the current session.

    The caller commits, so the entry lands in the same transaction as the
    change it describes.

    Args:
        action: Action string (e.g. PROJECT_DELETE, POST_PUBLISH)
        actor_id: Id of the user performing the action
        target_type: Type of target (e.g. project, post)
        target_id: ID of target entity
        metadata: Dict of extra details (stored as JSON)
    """
    ip = None
    ua = None
    try:
        ip = flask_request.remote_addr
        ua = str(flask_request.user_agent)[:500] if flask_request.user_agent else None
    except RuntimeError:
        pass

    entry = AuditLog(
        actor_user_id=actor_id,
        action=action,
        target_type=target_type,
        target_id=str(target_id) if target_id is not None else None,
        metadata_json=json.dumps(metadata) if metadata else None,
        ip_address=ip,
        user_agent=ua,
    )
    db.session.add(entry)
    return entry
