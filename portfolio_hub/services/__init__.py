"""
Services Package

Exports all services for easy importing.
"""

from portfolio_hub.services.posts import (
    PostNotFound,
    list_posts,
    get_post,
    create_post,
    update_post,
    delete_post,
)
from portfolio_hub.services.uploads import save_image

__all__ = [
    'PostNotFound',
    'list_posts',
    'get_post',
    'create_post',
    'update_post',
    'delete_post',
    'save_image',
]
