import datetime as dt
import jwt
from app.version import API_PREFIX
from app.utils import decode_token, TokenError


def _auth(token):
    return {'Authorization': f'Bearer {token}'}


def test_token_claims(app, make_user):
    user_id, token = make_user('bob', is_admin=False)
    with app.app_context():
        claims = decode_token(token)
    assert claims['id'] == user_id
    assert claims['username'] == 'bob'
    assert claims['email'] == 'bob@example.com'
    assert claims['isAdmin'] is False
    lifetime = claims['exp'] - claims['iat']
    assert lifetime == 7 * 24 * 3600


def test_expired_token_rejected(client, app, make_user):
    user_id, _ = make_user('bob')
    past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(days=8)
    token = jwt.encode(
        {'id': user_id, 'username': 'bob', 'email': 'bob@example.com', 'isAdmin': False,
         'iat': past, 'exp': past + dt.timedelta(days=7)},
        app.config['JWT_SECRET'],
        algorithm='HS256',
    )
    with app.app_context():
        try:
            decode_token(token)
            assert False, 'expired token accepted'
        except TokenError as exc:
            assert str(exc) == 'token expired'
    resp = client.get(f"{API_PREFIX}/auth/me", headers=_auth(token))
    assert resp.status_code == 401
    assert resp.get_json()['message'] == 'Non autorisé - Token invalide'


def test_token_signed_with_other_secret_rejected(client, make_user):
    user_id, _ = make_user('bob')
    forged = jwt.encode({'id': user_id, 'isAdmin': True}, 'not-the-secret', algorithm='HS256')
    resp = client.get(f"{API_PREFIX}/auth/me", headers=_auth(forged))
    assert resp.status_code == 401


def test_tampered_token_rejected(client, user_token):
    resp = client.get(f"{API_PREFIX}/auth/me", headers=_auth(user_token[:-2] + 'xx'))
    assert resp.status_code == 401


def test_header_without_bearer_prefix(client, user_token):
    resp = client.get(f"{API_PREFIX}/cart", headers={'Authorization': user_token})
    assert resp.status_code == 401
    assert resp.get_json()['message'] == 'Non autorisé - Aucun token fourni'


def test_identity_comes_from_claims(client, app):
    # A well-signed token is trusted as-is; the user row is not looked up
    token = jwt.encode(
        {'id': 'detached-id', 'username': 'x', 'email': 'x@example.com', 'isAdmin': False,
         'exp': dt.datetime.now(dt.timezone.utc) + dt.timedelta(hours=1)},
        app.config['JWT_SECRET'],
        algorithm='HS256',
    )
    resp = client.get(f"{API_PREFIX}/cart", headers=_auth(token))
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_non_admin_forbidden_on_admin_routes(client, user_token):
    resp = client.post(f"{API_PREFIX}/products", json={}, headers=_auth(user_token))
    assert resp.status_code == 403
    assert resp.get_json()['message'] == 'Accès interdit - Privilèges admin requis'


def test_admin_routes_require_token(client):
    resp = client.delete(f"{API_PREFIX}/products/anything")
    assert resp.status_code == 401
