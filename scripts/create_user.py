"""Create a user, or reset the password of an existing one.

Usage: python scripts/create_user.py NAME PASSWORD
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loginapp import create_app
from loginapp.extensions import db
from loginapp.models import User


def main(argv):
    if len(argv) != 3:
        print(__doc__.strip().splitlines()[-1])
        return 2

    name, password = argv[1].strip(), argv[2]
    if not name or not password:
        print('Name and password must not be empty')
        return 2

    app = create_app()
    with app.app_context():
        user = User.find_by_name(name)
        if not user:
            user = User(name=name)
            db.session.add(user)
            print(f'New user {name} created')
        else:
            print(f'Password reset for existing user {name}')
        user.set_password(password)
        db.session.commit()
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
