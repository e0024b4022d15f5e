from app.version import API_PREFIX


def test_login_rate_limited_per_ip(client, make_user):
    make_user('alice')
    for _ in range(5):
        resp = client.post(f"{API_PREFIX}/auth/login", json={'email': 'alice@example.com', 'password': 'bad'})
        assert resp.status_code == 401

    resp = client.post(f"{API_PREFIX}/auth/login", json={'email': 'alice@example.com', 'password': 'secret123'})
    assert resp.status_code == 429
    body = resp.get_json()
    assert body['status'] == 'error'
    assert body['message'] == 'Trop de tentatives de connexion, veuillez réessayer plus tard'


def test_other_addresses_not_affected(client, make_user):
    make_user('alice')
    for _ in range(6):
        client.post(f"{API_PREFIX}/auth/login", json={'email': 'alice@example.com', 'password': 'bad'})

    resp = client.post(
        f"{API_PREFIX}/auth/login",
        json={'email': 'alice@example.com', 'password': 'secret123'},
        environ_base={'REMOTE_ADDR': '10.0.0.2'},
    )
    assert resp.status_code == 200


def test_limit_does_not_apply_to_register(client):
    for i in range(7):
        resp = client.post(
            f"{API_PREFIX}/auth/register",
            json={'username': f'user{i}', 'email': f'user{i}@example.com', 'password': 'secret123'},
        )
        assert resp.status_code == 200
