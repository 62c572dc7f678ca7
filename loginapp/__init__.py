"""
Login Application - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from loginapp.extensions import db, login_manager
from loginapp.config import Config


def create_app(config_class=Config, instance_path=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        instance_path: Instance folder override (default: Flask's own)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, instance_path=instance_path)
    app.config.from_object(config_class)
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        app.config['SQLALCHEMY_DATABASE_URI'] = \
            'sqlite:///' + os.path.join(app.instance_path, 'loginapp.db')

    logging.getLogger('loginapp').setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'user_sessions.new'
    login_manager.login_message = 'Please log in.'
    login_manager.login_message_category = 'alert'

    # Register blueprints
    from loginapp.pages import pages_bp
    from loginapp.user_sessions import user_sessions_bp
    from loginapp.users import users_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(user_sessions_bp)
    app.register_blueprint(users_bp)

    # Expose the current-user resolver to every template
    @app.context_processor
    def inject_current_user_id():
        from loginapp.auth import current_user_id
        return dict(current_user_id=current_user_id())

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from loginapp.models import User
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None

    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()

    return app

