from tests.conftest import login, flashes


def test_index(client):
    r = client.get('/')
    assert r.status_code == 200
    assert 'Home' in r.get_data(as_text=True)


def test_secret_requires_login(client):
    r = client.get('/pages/secret')
    assert r.status_code == 302
    assert '/user_sessions/new' in r.headers['Location']
    assert flashes(client) == [('alert', 'Please log in.')]


def test_secret_after_login(client, alice):
    login(client, 'alice', 'correct123')
    r = client.get('/pages/secret')
    assert r.status_code == 200
    assert 'alice' in r.get_data(as_text=True)


def test_secret_after_logout(client, alice):
    login(client, 'alice', 'correct123')
    client.delete(f'/user_sessions/{alice}')
    r = client.get('/pages/secret')
    assert r.status_code == 302


def test_login_does_not_follow_next(client, alice):
    client.get('/pages/secret')
    r = client.post('/user_sessions?next=/pages/secret',
                    data={'user[name]': 'alice', 'user[password]': 'correct123'})
    assert r.headers['Location'].endswith('/')
    assert not r.headers['Location'].endswith('/pages/secret')
