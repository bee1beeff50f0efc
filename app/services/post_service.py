"""
Post Service - gallery publishing, play counting and the like toggle.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import case
from sqlalchemy.exc import IntegrityError

from app.exceptions import Forbidden, NotFound, Unauthorized
from app.models import db, Like, Post, Project, log_action
from app.utils import optional_text, require_text, validate_description, validate_title

logger = logging.getLogger(__name__)


class PostService:
    """Public gallery backed by the posts and likes tables."""

    def _get_post(self, post_id: str) -> Post:
        post = Post.query.get(post_id)
        if not post:
            raise NotFound('Post not found')
        return post

    def _current_likes(self, post_id: str) -> int:
        likes = db.session.query(Post.likes).filter(Post.id == post_id).scalar()
        return likes or 0

    def list_public(self) -> List[Post]:
        """Return every post, newest first."""
        return Post.query.order_by(Post.created_at.desc()).all()

    def get_one(self, post_id: str) -> Post:
        """Return a post and count the read as a play."""
        post = self._get_post(post_id)
        Post.query.filter(Post.id == post_id).update(
            {Post.plays: Post.plays + 1},
            synchronize_session=False,
        )
        db.session.commit()
        # Commit expired the instance; the next access reloads the new count
        return post

    def publish(
        self,
        project_id: str,
        requester_id: str,
        title: str,
        description: Optional[str] = None,
        thumbnail: Optional[str] = None,
        media_url: Optional[str] = None,
    ) -> Post:
        """Publish an owned project to the gallery."""
        title = validate_title(title)
        description = validate_description(description)
        thumbnail = optional_text(thumbnail, 'thumbnail')
        media_url = optional_text(media_url, 'media_url')

        project_id = require_text(project_id, 'project_id')
        project = Project.query.get(project_id)
        if not project:
            raise NotFound('Project not found')
        if project.owner_id != requester_id:
            raise Forbidden('Access denied — you do not own this project')

        post = Post(
            owner_id=requester_id,
            project_id=project.id,
            title=title,
            description=description,
            thumbnail=thumbnail,
            media_url=media_url,
            likes=0,
            plays=0,
            created_at=datetime.utcnow(),
        )
        db.session.add(post)
        db.session.flush()
        log_action(
            'POST_PUBLISH',
            actor_id=requester_id,
            target_type='post',
            target_id=post.id,
            metadata={'project_id': project.id},
        )
        db.session.commit()
        logger.info('Project %s published as post %s', project.id, post.id)
        return post

    def unpublish(self, post_id: str, requester_id: str) -> None:
        """Remove an owned post together with all of its likes."""
        post = self._get_post(post_id)
        if post.owner_id != requester_id:
            raise Forbidden('Access denied — you do not own this post')

        removed = Like.query.filter(Like.post_id == post_id).delete(synchronize_session=False)
        db.session.delete(post)
        log_action(
            'POST_UNPUBLISH',
            actor_id=requester_id,
            target_type='post',
            target_id=post_id,
            metadata={'project_id': post.project_id, 'likes_removed': removed},
        )
        db.session.commit()
        logger.info('Post %s unpublished (%d likes removed)', post_id, removed)

    def toggle_like(self, post_id: str, user_id: Optional[str]) -> dict:
        """
        Flip the requester's like on a post.

        Unliked -> Liked inserts one Like row and increments the counter;
        Liked -> Unliked deletes it and decrements, floored at zero. The
        delete and insert are each a single conditional statement and the
        (user_id, post_id) unique constraint rejects a second concurrent
        insert, so the pair never holds more than one row.

        Returns:
            Dict with ``liked`` (new state) and ``likes`` (counter after the
            change, re-read from the database).
        """
        if not user_id:
            raise Unauthorized()
        self._get_post(post_id)

        removed = Like.query.filter(
            Like.post_id == post_id,
            Like.user_id == user_id,
        ).delete(synchronize_session=False)

        if removed:
            Post.query.filter(Post.id == post_id).update(
                {Post.likes: case((Post.likes > 0, Post.likes - 1), else_=0)},
                synchronize_session=False,
            )
            db.session.commit()
            liked = False
        else:
            try:
                db.session.add(Like(user_id=user_id, post_id=post_id, created_at=datetime.utcnow()))
                db.session.flush()
            except IntegrityError:
                # Another request inserted the same like first
                db.session.rollback()
                logger.debug('Concurrent like on post %s by %s already recorded', post_id, user_id)
            else:
                Post.query.filter(Post.id == post_id).update(
                    {Post.likes: Post.likes + 1},
                    synchronize_session=False,
                )
                db.session.commit()
            liked = True

        likes = self._current_likes(post_id)
        logger.debug('Post %s like toggled by %s: liked=%s likes=%d', post_id, user_id, liked, likes)
        return {'liked': liked, 'likes': likes}


# Singleton instance
post_service = PostService()
