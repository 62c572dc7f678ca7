"""
User Model
"""

from datetime import datetime, timezone

from flask import current_app
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from loginapp.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class User(UserMixin, db.Model):
    """User model for authentication.

    Only a salted hash of the password is stored; `authenticate` compares a
    submitted plaintext against it.
    """
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=_utcnow)

    @classmethod
    def find_by_name(cls, name):
        """Exact-match lookup by login name; None when there is no such user."""
        return cls.query.filter_by(name=name).first()

    def set_password(self, password):
        method = current_app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
        self.password_hash = generate_password_hash(password, method=method)

    def authenticate(self, password):
        """Return this user if `password` matches the stored hash, else None."""
        if check_password_hash(self.password_hash, password):
            return self
        return None

    def __repr__(self):
        return f'<User {self.name}>'
