"""
Flask Extensions

The session's user-id slot is owned by Flask-Login; nothing else writes it.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for user authentication
login_manager = LoginManager()
