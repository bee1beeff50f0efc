"""
Post Routes - public gallery, publishing, and likes.
"""

from flask import Blueprint, jsonify

from config import config
from app.auth.decorators import with_identity
from app.utils import json_body
from app.limiter import limiter
from app.services.post_service import post_service

bp = Blueprint('posts', __name__)


# ==================== Public gallery ====================

@bp.route('/posts', methods=['GET'])
def list_posts():
    """Return every published post, newest first."""
    posts = post_service.list_public()
    return jsonify({'posts': [p.to_dict() for p in posts]})


@bp.route('/posts/<post_id>', methods=['GET'])
def get_post(post_id):
    """Return one post; each read counts as a play."""
    post = post_service.get_one(post_id)
    return jsonify({'post': post.to_dict()})


# ==================== Publishing ====================

@bp.route('/posts', methods=['POST'])
@with_identity
def create_post(requester_id):
    """Publish an owned project."""
    data = json_body()
    post = post_service.publish(
        project_id=data.get('project_id'),
        requester_id=requester_id,
        title=data.get('title'),
        description=data.get('description'),
        thumbnail=data.get('thumbnail'),
        media_url=data.get('media_url'),
    )
    return jsonify({'post': post.to_dict()}), 201


@bp.route('/posts/<post_id>', methods=['DELETE'])
@with_identity
def delete_post(post_id, requester_id):
    """Unpublish an owned post and drop its likes."""
    post_service.unpublish(post_id, requester_id)
    return jsonify({'success': True})


# ==================== Likes ====================

@bp.route('/posts/<post_id>/like', methods=['POST'])
@with_identity
@limiter.limit(config.LIKE_RATE_LIMIT)
def toggle_like(post_id, requester_id):
    """Like the post, or remove the like if already given."""
    return jsonify(post_service.toggle_like(post_id, requester_id))
