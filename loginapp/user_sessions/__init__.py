"""
User Sessions Blueprint
"""

from flask import Blueprint

user_sessions_bp = Blueprint('user_sessions', __name__)

from loginapp.user_sessions import routes  # noqa: E402, F401
