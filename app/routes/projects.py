"""
Project Routes - CRUD over the caller's saved projects.
"""

from flask import Blueprint, jsonify

from app.auth.decorators import with_identity
from app.utils import json_body
from app.services.project_service import project_service

bp = Blueprint('projects', __name__)


@bp.route('/projects', methods=['GET'])
@with_identity
def list_projects(requester_id):
    """Return projects owned by the current user."""
    projects = project_service.list(requester_id)
    return jsonify({'projects': [p.to_dict() for p in projects]})


@bp.route('/projects/<project_id>', methods=['GET'])
@with_identity
def get_project(project_id, requester_id):
    """Return one owned project."""
    project = project_service.get(project_id, requester_id)
    return jsonify({'project': project.to_dict()})


@bp.route('/projects', methods=['POST'])
@with_identity
def create_project(requester_id):
    """Save a new project."""
    data = json_body()
    project = project_service.create(
        owner_id=requester_id,
        type=data.get('type'),
        title=data.get('title'),
        data=data.get('data'),
        description=data.get('description'),
        thumbnail=data.get('thumbnail'),
    )
    return jsonify({'project': project.to_dict()}), 201


@bp.route('/projects/<project_id>', methods=['PATCH'])
@with_identity
def update_project(project_id, requester_id):
    """Apply a partial update to an owned project."""
    project = project_service.update(project_id, requester_id, json_body())
    return jsonify({'project': project.to_dict()})


@bp.route('/projects/<project_id>', methods=['DELETE'])
@with_identity
def delete_project(project_id, requester_id):
    """Delete an owned project. Published posts are kept."""
    project_service.delete(project_id, requester_id)
    return jsonify({'success': True})
