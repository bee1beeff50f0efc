"""
Project Service - CRUD over a user's saved creative projects.

Every operation takes the requester's id explicitly; ownership is checked
against the row re-read from the database on each call.
"""

import logging
from datetime import datetime
from typing import List, Optional

from app.exceptions import Forbidden, NotFound
from app.models import db, Project, log_action
from app.utils import (
    advance_timestamp,
    optional_text,
    require_text,
    validate_description,
    validate_project_type,
    validate_title,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('title', 'description', 'data', 'thumbnail')


class ProjectService:
    """Owner-scoped project storage."""

    def list(self, owner_id: str) -> List[Project]:
        """Return all projects of an owner, most recently updated first."""
        return (
            Project.query
            .filter_by(owner_id=owner_id)
            .order_by(Project.updated_at.desc())
            .all()
        )

    def get(self, project_id: str, requester_id: str) -> Project:
        """Return a project the requester owns."""
        project = Project.query.get(project_id)
        if not project:
            raise NotFound('Project not found')
        if project.owner_id != requester_id:
            raise Forbidden('Access denied — you do not own this project')
        return project

    def create(
        self,
        owner_id: str,
        type: str,
        title: str,
        data: str,
        description: Optional[str] = None,
        thumbnail: Optional[str] = None,
    ) -> Project:
        """Validate and persist a new project."""
        project_type = validate_project_type(type)
        title = validate_title(title)
        description = validate_description(description)
        data = require_text(data, 'data')
        thumbnail = optional_text(thumbnail, 'thumbnail')

        now = datetime.utcnow()
        project = Project(
            owner_id=owner_id,
            type=project_type,
            title=title,
            description=description,
            data=data,
            thumbnail=thumbnail,
            created_at=now,
            updated_at=now,
        )
        db.session.add(project)
        db.session.commit()
        logger.info('Project %s (%s) created by %s', project.id, project_type, owner_id)
        return project

    def update(self, project_id: str, requester_id: str, fields: dict) -> Project:
        """
        Apply a partial update.

        Keys absent from ``fields`` are left unchanged. An empty string or
        None clears description and thumbnail. Everything is validated before
        the row is touched.
        """
        project = self.get(project_id, requester_id)

        changes = {}
        if 'title' in fields:
            changes['title'] = validate_title(fields['title'])
        if 'description' in fields:
            changes['description'] = validate_description(fields['description'])
        if 'data' in fields:
            changes['data'] = require_text(fields['data'], 'data')
        if 'thumbnail' in fields:
            changes['thumbnail'] = optional_text(fields['thumbnail'], 'thumbnail')

        for key, value in changes.items():
            setattr(project, key, value)
        project.updated_at = advance_timestamp(project.updated_at)
        db.session.commit()

        logger.info('Project %s updated (%s)', project_id, ', '.join(sorted(changes)) or 'touch')
        return Project.query.get(project_id)

    def delete(self, project_id: str, requester_id: str) -> None:
        """Delete a project. Posts published from it are left in the gallery."""
        project = self.get(project_id, requester_id)
        db.session.delete(project)
        log_action(
            'PROJECT_DELETE',
            actor_id=requester_id,
            target_type='project',
            target_id=project_id,
            metadata={'type': project.type, 'title': project.title},
        )
        db.session.commit()
        logger.info('Project %s deleted by %s', project_id, requester_id)


# Singleton instance
project_service = ProjectService()
