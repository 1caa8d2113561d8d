"""
Configuration settings for Portfolio Hub
"""
import os


def _database_uri(basedir):
    """Build the SQLAlchemy URI from the environment."""
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    if os.environ.get('DB_HOST'):
        return 'mysql+pymysql://{user}:{password}@{host}/{name}?charset=utf8mb4'.format(
            user=os.environ.get('DB_USER', 'root'),
            password=os.environ.get('DB_PASSWORD', ''),
            host=os.environ['DB_HOST'],
            name=os.environ.get('DB_NAME', 'db_portfolio_hub'),
        )
    return 'sqlite:///' + os.path.join(basedir, 'instance', 'portfolio_hub.db')


class Config:
    """Flask application configuration"""

    # Session signing key; create_app falls back to a per-process token
    SECRET_KEY = os.environ.get('SESSION_SECRET') or None

    PORT = int(os.environ.get('PORT', 3000))

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 10))
    SQLALCHEMY_DATABASE_URI = _database_uri(basedir)
    SQLALCHEMY_ENGINE_OPTIONS = (
        {'pool_size': DB_POOL_SIZE, 'pool_pre_ping': True}
        if SQLALCHEMY_DATABASE_URI.startswith('mysql') else {}
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Uploaded images, served under /public/uploads
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or \
        os.path.join(os.path.dirname(__file__), 'static', 'uploads')
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Shared admin password (session-based, no user accounts)
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or None


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_PASSWORD = 'test-admin-password'
