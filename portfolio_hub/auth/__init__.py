"""
Auth Blueprint

Login, guest mode and logout for the shared admin session.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from portfolio_hub.auth import routes  # noqa: E402, F401
