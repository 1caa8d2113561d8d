"""
Error Handlers

Maps failures onto short plain-text responses. Internal details (query
text, credentials, tracebacks) only ever reach the log.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import Forbidden, NotFound, InternalServerError
from flask import request

from portfolio_hub.extensions import db
from portfolio_hub.services import PostNotFound

logger = logging.getLogger(__name__)

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}

FORBIDDEN_MESSAGE = 'Admin access only.'
POST_NOT_FOUND_MESSAGE = 'Post not found.'
PAGE_NOT_FOUND_MESSAGE = 'Page not found.'
SERVER_ERROR_MESSAGE = 'Server error occurred.'


def register_error_handlers(app):
    """Attach the error handlers to the application."""

    @app.errorhandler(Forbidden)
    def forbidden(_error):
        return FORBIDDEN_MESSAGE, 403, PLAIN_TEXT

    @app.errorhandler(PostNotFound)
    def post_not_found(_error):
        return POST_NOT_FOUND_MESSAGE, 404, PLAIN_TEXT

    @app.errorhandler(NotFound)
    def page_not_found(_error):
        return PAGE_NOT_FOUND_MESSAGE, 404, PLAIN_TEXT

    @app.errorhandler(SQLAlchemyError)
    def storage_failure(error):
        db.session.rollback()
        logger.error('Storage failure on %s %s', request.method, request.path, exc_info=error)
        return SERVER_ERROR_MESSAGE, 500, PLAIN_TEXT

    @app.errorhandler(InternalServerError)
    def server_error(error):
        original = getattr(error, 'original_exception', None) or error
        logger.error('Unhandled error on %s %s', request.method, request.path, exc_info=original)
        return SERVER_ERROR_MESSAGE, 500, PLAIN_TEXT
