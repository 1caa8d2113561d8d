"""
Post Lifecycle Service

CRUD operations on portfolio posts. Every write is a single statement
committed on its own; storage errors propagate to the application's
error handlers.
"""

import logging

from portfolio_hub.extensions import db
from portfolio_hub.models import Post

logger = logging.getLogger(__name__)


class PostNotFound(LookupError):
    """Raised when no post matches the requested id."""

    def __init__(self, post_id):
        super().__init__(f'Post {post_id} does not exist')
        self.post_id = post_id


def list_posts():
    """Return all posts, newest first."""
    return Post.query.order_by(Post.created_at.desc(), Post.id.desc()).all()


def get_post(post_id):
    """Fetch a single post or raise PostNotFound."""
    post = db.session.get(Post, post_id)
    if post is None:
        raise PostNotFound(post_id)
    return post


def create_post(title, summary, content, link_url):
    """Insert a new post and return its id.

    Values are stored exactly as given; None and empty strings are accepted.
    """
    post = Post(title=title, summary=summary, content=content, link_url=link_url)
    db.session.add(post)
    db.session.commit()
    logger.info('Created post %s', post.id)
    return post.id


def update_post(post_id, title, summary, content, link_url):
    """Replace the editable fields of a post.

    An id with no matching row updates nothing and is not reported.
    """
    updated = Post.query.filter_by(id=post_id).update({
        'title': title,
        'summary': summary,
        'content': content,
        'link_url': link_url,
    })
    db.session.commit()
    logger.info('Updated post %s (%d row(s))', post_id, updated)


def delete_post(post_id):
    """Hard-delete a post; deleting a missing id is a no-op."""
    deleted = Post.query.filter_by(id=post_id).delete()
    db.session.commit()
    logger.info('Deleted post %s (%d row(s))', post_id, deleted)
