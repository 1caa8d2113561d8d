"""
Admin Blueprint

Create, edit and delete routes, all behind the admin session flag.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from portfolio_hub.admin import routes  # noqa: E402, F401
