"""
Main API Routes - service index and health check.
"""

from flask import Blueprint, jsonify
from sqlalchemy import text

from config import config
from app.models import db

bp = Blueprint('api', __name__)


@bp.route('/')
def index():
    """Describe the service."""
    return jsonify({
        'name': 'studio',
        'project_types': list(config.PROJECT_TYPES),
        'endpoints': ['/api/projects', '/api/posts', '/api/auth/me'],
    })


@bp.route('/api/health')
def health():
    """Report whether the database answers."""
    db.session.execute(text('SELECT 1'))
    return jsonify({'status': 'ok'})
