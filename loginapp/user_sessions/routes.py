"""
User Sessions Routes

Login (create) and logout (destroy) of the session's user-id slot.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from pydantic import ValidationError

from loginapp.auth import authenticate, sign_in, sign_out
from loginapp.schemas import LoginCredentials
from loginapp.user_sessions import user_sessions_bp

logger = logging.getLogger(__name__)

LOGIN_FAILED = 'Login failed.'


@user_sessions_bp.route('/login')
@user_sessions_bp.route('/user_sessions/new')
def new():
    """Render the login form"""
    return render_template('user_sessions/new.html')


@user_sessions_bp.route('/user_sessions', methods=['POST'])
def create():
    """Log a user in"""
    try:
        credentials = LoginCredentials.from_form(request.form)
    except ValidationError:
        logger.info('Rejected malformed login form')
        flash(LOGIN_FAILED, 'alert')
        return redirect(url_for('user_sessions.new'))

    user = authenticate(credentials.name, credentials.password)
    if user is None:
        logger.info('Failed login for name %r', credentials.name)
        flash(LOGIN_FAILED, 'alert')
        return redirect(url_for('user_sessions.new'))

    sign_in(user)
    return redirect(url_for('pages.index'))


@user_sessions_bp.route('/user_sessions/<id>', methods=['DELETE'])
def destroy(id):
    """Log out. The id segment is not consulted."""
    sign_out()
    # 303 so clients re-issue the follow-up request as GET
    return redirect(url_for('pages.index'), code=303)
