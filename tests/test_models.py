import pytest
from pydantic import ValidationError

from loginapp.auth import authenticate
from loginapp.extensions import db
from loginapp.models import User
from loginapp.schemas import LoginCredentials, Registration, error_messages


def test_password_is_hashed(app):
    with app.app_context():
        user = User(name='hank')
        user.set_password('hankpass')
        assert user.password_hash != 'hankpass'
        assert user.password_hash.startswith('pbkdf2:sha256')


def test_authenticate(app, alice):
    with app.app_context():
        user = User.find_by_name('alice')
        assert user.authenticate('correct123') is user
        assert user.authenticate('wrong') is None
        assert user.authenticate('') is None


def test_find_by_name_is_exact(app, alice):
    with app.app_context():
        assert User.find_by_name('alice').id == alice
        assert User.find_by_name('Alice') is None
        assert User.find_by_name('ali') is None


def test_authenticate_service(app, alice):
    with app.app_context():
        assert authenticate('alice', 'correct123').id == alice
        assert authenticate('alice', 'wrong') is None
        assert authenticate('bob', 'correct123') is None


def test_unknown_name_still_checks_a_hash(app, alice, monkeypatch):
    from loginapp.auth import services
    calls = []
    real_check = services.check_password_hash

    def counting_check(pwhash, password):
        calls.append(password)
        return real_check(pwhash, password)

    monkeypatch.setattr(services, 'check_password_hash', counting_check)
    with app.app_context():
        assert authenticate('bob', 'anything') is None
    assert calls == ['anything']


def test_name_is_unique(app, alice):
    from sqlalchemy.exc import IntegrityError
    with app.app_context():
        dup = User(name='alice')
        dup.set_password('x')
        db.session.add(dup)
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_login_credentials_from_form():
    creds = LoginCredentials.from_form({'user[name]': ' alice ', 'user[password]': ' pw '})
    # both fields are taken verbatim
    assert creds.name == ' alice '
    assert creds.password == ' pw '


def test_login_credentials_require_both_fields():
    with pytest.raises(ValidationError):
        LoginCredentials.from_form({'user[name]': 'alice'})
    with pytest.raises(ValidationError):
        LoginCredentials.from_form({'user[password]': 'pw'})


def test_registration_error_messages():
    with pytest.raises(ValidationError) as excinfo:
        Registration.from_form({'user[name]': '', 'user[password]': 'a', 'user[password_confirmation]': 'a'})
    assert error_messages(excinfo.value) == ["Name can't be blank."]

    with pytest.raises(ValidationError) as excinfo:
        Registration.from_form({'user[name]': 'a', 'user[password]': 'a', 'user[password_confirmation]': 'b'})
    assert error_messages(excinfo.value) == ["Password confirmation doesn't match Password."]
