"""
Admin Decorator

Write routes are guarded by the request's AuthContext only.
"""

from functools import wraps
from flask import abort, g

from portfolio_hub.auth.gate import load_auth_context


def admin_required(f):
    """Decorator to ensure the request comes from an admin session.

    Denied requests end with 403 before the view runs, so nothing is read
    from or written to the database.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth = g.get('auth') or load_auth_context()
        if not auth.is_admin:
            abort(403)
        return f(*args, **kwargs)
    return wrapper
