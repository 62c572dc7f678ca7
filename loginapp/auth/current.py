"""
Current-user resolver.

Reads the signed-in user's id from the session once per request and keeps
it on ``g`` for the rest of that request.
"""

import logging

from flask import g, session

logger = logging.getLogger(__name__)

# Flask-Login stores the id under this key on login_user() and pops it on logout_user()
SESSION_USER_KEY = '_user_id'

_CACHE_ATTR = 'current_user_id'


def current_user_id():
    """Return the id of the signed-in user, or None when nobody is logged in."""
    if _CACHE_ATTR not in g:
        setattr(g, _CACHE_ATTR, _read_session_slot())
    return getattr(g, _CACHE_ATTR)


def forget_current_user_id():
    """Drop the cached value after the session slot changed."""
    g.pop(_CACHE_ATTR, None)


def _read_session_slot():
    value = session.get(SESSION_USER_KEY)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning('Ignoring malformed user id in session: %r', value)
        return None
