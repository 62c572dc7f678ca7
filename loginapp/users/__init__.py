"""
Users Blueprint
"""

from flask import Blueprint

users_bp = Blueprint('users', __name__)

from loginapp.users import routes  # noqa: E402, F401
