"""
Posts Blueprint - public listing, detail pages and editor image uploads
"""

from flask import Blueprint

posts_bp = Blueprint('posts', __name__)

from portfolio_hub.posts import routes  # noqa: E402, F401
