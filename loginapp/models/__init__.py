"""
Models Package

Exports all models for easy importing.
"""

from loginapp.models.user import User

__all__ = ['User']
