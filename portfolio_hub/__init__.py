"""
Portfolio Hub - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
import secrets

from flask import Flask, g, session
from portfolio_hub.extensions import db
from portfolio_hub.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, static_url_path='/public')
    app.config.from_object(config_class)

    if not app.config.get('SECRET_KEY'):
        app.config['SECRET_KEY'] = secrets.token_hex(32)
        logger.warning('SESSION_SECRET is not set; using a per-process key, '
                       'sessions will not be shared across workers or restarts')

    # Initialize extensions
    db.init_app(app)

    from portfolio_hub.auth.gate import AdminGate, load_auth_context
    app.extensions['admin_gate'] = AdminGate(app.config.get('ADMIN_PASSWORD'))
    if not app.extensions['admin_gate'].enabled:
        logger.warning('ADMIN_PASSWORD is not set; admin login is disabled')

    # Register blueprints
    from portfolio_hub.auth import auth_bp
    from portfolio_hub.admin import admin_bp
    from portfolio_hub.posts import posts_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(posts_bp)

    from portfolio_hub.errors import register_error_handlers
    register_error_handlers(app)

    @app.before_request
    def attach_auth_context():
        """Resolve the admin flag once per request."""
        g.auth = load_auth_context(lambda: session)

    # Context processor for admin flag
    @app.context_processor
    def inject_is_admin_flag():
        """Inject `is_admin` flag into templates based on the request's AuthContext."""
        auth = g.get('auth')
        return dict(is_admin=auth.is_admin if auth else False)

    # Create database tables
    with app.app_context():
        _ensure_sqlite_dir(app.config['SQLALCHEMY_DATABASE_URI'])
        db.create_all()

    return app


def _ensure_sqlite_dir(uri):
    """Create the parent directory of a file-backed SQLite database."""
    prefix = 'sqlite:///'
    if uri.startswith(prefix) and uri != prefix + ':memory:':
        os.makedirs(os.path.dirname(uri[len(prefix):]) or '.', exist_ok=True)
