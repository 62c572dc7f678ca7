"""
Authentication Services

Login and logout against the session. `authenticate` never touches the
session; `sign_in`/`sign_out` are the only writers of the user-id slot.
"""

import logging
from functools import lru_cache

from flask import current_app
from flask_login import login_user, logout_user
from werkzeug.security import generate_password_hash, check_password_hash

from loginapp.auth.current import forget_current_user_id
from loginapp.models import User

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _dummy_hash(method):
    return generate_password_hash('not-a-real-password', method=method)


def authenticate(name, password):
    """Return the user named `name` if `password` matches, else None.

    Unknown names and wrong passwords are indistinguishable to the caller.
    An unknown name still pays for one hash comparison.
    """
    user = User.find_by_name(name)
    if user is None:
        method = current_app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
        check_password_hash(_dummy_hash(method), password)
        return None
    return user.authenticate(password)


def sign_in(user):
    """Store `user`'s id in the session."""
    login_user(user)
    forget_current_user_id()
    logger.info('User %s logged in', user.id)


def sign_out():
    """Clear the session's user-id slot. Safe to call when nobody is logged in."""
    logout_user()
    forget_current_user_id()
    logger.info('Session user cleared')
