"""
Routes package for Studio.
Registers all Flask blueprints.
"""

from .api import bp as api_bp
from .projects import bp as projects_bp
from .posts import bp as posts_bp

__all__ = ['api_bp', 'projects_bp', 'posts_bp']
