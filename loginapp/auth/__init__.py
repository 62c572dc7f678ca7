"""
Auth Package

Credential checks and the session's user-id slot.
"""

from loginapp.auth.current import SESSION_USER_KEY, current_user_id
from loginapp.auth.services import authenticate, sign_in, sign_out

__all__ = ['SESSION_USER_KEY', 'current_user_id', 'authenticate', 'sign_in', 'sign_out']
