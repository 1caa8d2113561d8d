"""
Flask Extensions

Admin authorization is session-based; there are no user accounts, so no
login manager is registered.
"""

from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()
