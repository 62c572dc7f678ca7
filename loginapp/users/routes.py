"""
Users Routes

Listing and registration. Registration only stores the account; logging in
is a separate step through the login form.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from loginapp.extensions import db
from loginapp.models import User
from loginapp.schemas import Registration, error_messages
from loginapp.users import users_bp

logger = logging.getLogger(__name__)


@users_bp.route('/users')
def index():
    """List registered users"""
    users = User.query.order_by(User.name).all()
    return render_template('users/index.html', users=users)


@users_bp.route('/users/new')
def new():
    """Registration form"""
    return render_template('users/new.html', name='')


@users_bp.route('/users', methods=['POST'])
def create():
    """Register a user"""
    submitted_name = request.form.get('user[name]', '').strip()

    try:
        registration = Registration.from_form(request.form)
    except ValidationError as e:
        return _reject(submitted_name, error_messages(e))

    if User.find_by_name(registration.name):
        return _reject(submitted_name, ['Name has already been taken.'])

    user = User(name=registration.name)
    user.set_password(registration.password)

    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not register user %r', registration.name)
        return _reject(submitted_name, ['An error occurred during registration. Please try again.'])

    logger.info('Registered user %s (%s)', user.id, user.name)
    flash('Account created. Please log in.', 'notice')
    return redirect(url_for('user_sessions.new'))


def _reject(name, messages):
    for message in messages:
        flash(message, 'alert')
    return render_template('users/new.html', name=name), 422
