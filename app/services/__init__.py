"""
Services package for Studio.
"""

from .account_service import AccountService, account_service
from .project_service import ProjectService, project_service
from .post_service import PostService, post_service

__all__ = [
    'AccountService', 'account_service',
    'ProjectService', 'project_service',
    'PostService', 'post_service',
]
