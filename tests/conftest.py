import pytest

from loginapp import create_app
from loginapp.config import TestConfig
from loginapp.extensions import db
from loginapp.models import User


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    """Create a user and return its id."""
    def _make_user(name, password):
        with app.app_context():
            user = User(name=name)
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user.id
    return _make_user


@pytest.fixture()
def alice(make_user):
    return make_user('alice', 'correct123')


def login(client, name, password, **kwargs):
    return client.post('/user_sessions', data={'user[name]': name, 'user[password]': password}, **kwargs)


def session_user_id(client):
    with client.session_transaction() as sess:
        return sess.get('_user_id')


def flashes(client):
    with client.session_transaction() as sess:
        return list(sess.get('_flashes', []))
