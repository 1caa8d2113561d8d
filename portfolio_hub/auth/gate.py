"""
Authorization Gate

A single shared admin password unlocks the write routes. The only state is
the boolean session['is_admin']; there are no user accounts.
"""

import logging
from dataclasses import dataclass

from flask import session

logger = logging.getLogger(__name__)

SESSION_KEY = 'is_admin'


def is_authorized(sess):
    """True only when the session carries a truthy admin flag."""
    return bool(sess.get(SESSION_KEY, False))


@dataclass(frozen=True)
class AuthContext:
    """Authorization state of the current request."""
    is_admin: bool = False


def load_auth_context(session_lookup=lambda: session):
    """Derive the request's AuthContext from the session.

    Args:
        session_lookup: callable returning the current session mapping
    """
    return AuthContext(is_admin=is_authorized(session_lookup()))


class AdminGate:
    """Checks the shared admin password and flips the session flag."""

    def __init__(self, admin_password):
        self._admin_password = admin_password

    @property
    def enabled(self):
        return bool(self._admin_password)

    def login(self, sess, password):
        """Grant admin rights on an exact password match.

        A mismatch leaves the session untouched. Without a configured
        password every attempt fails.
        """
        if self.enabled and password == self._admin_password:
            sess[SESSION_KEY] = True
            logger.info('Admin login succeeded')
            return True
        logger.info('Admin login failed')
        return False

    def enter_guest_mode(self, sess):
        # Stored as an explicit False, not removed
        sess[SESSION_KEY] = False
        logger.info('Guest mode entered')

    def logout(self, sess):
        """Drop the whole session, not only the admin flag."""
        sess.clear()
        logger.info('Session cleared on logout')
