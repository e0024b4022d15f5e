import datetime as dt
from models import db
from models.cart import CartItem
from models.product import Product
from app.version import API_PREFIX


def _auth(token):
    return {'Authorization': f'Bearer {token}'}


def _payload(**overrides):
    data = {
        'name': 'Sac en Cuir',
        'description': 'Sac à main en cuir véritable',
        'price': 140000,
        'category': 'accessories',
        'imageUrl': '/uploads/bag.jpg',
        'materials': 'Cuir',
        'care': 'Chiffon sec',
    }
    data.update(overrides)
    return data


def _seed_timeline(make_product):
    base = dt.datetime(2024, 1, 1)
    ids = {}
    ids['old'] = make_product('Chemise Lin', price=39000, category='clothes', created_at=base)
    ids['mid'] = make_product('Parfum Floral', price=47500, category='perfumes',
                              created_at=base + dt.timedelta(days=1))
    ids['new'] = make_product('Foulard en Soie', price=32500, sale_price=24500, category='accessories',
                              description='Foulard avec motifs floraux', created_at=base + dt.timedelta(days=2))
    return ids


def test_list_is_newest_first(client, make_product):
    ids = _seed_timeline(make_product)
    resp = client.get(f"{API_PREFIX}/products")
    assert resp.status_code == 200
    assert [p['id'] for p in resp.get_json()] == [ids['new'], ids['mid'], ids['old']]


def test_list_filters_by_category(client, make_product):
    ids = _seed_timeline(make_product)
    resp = client.get(f"{API_PREFIX}/products?category=perfumes")
    assert [p['id'] for p in resp.get_json()] == [ids['mid']]

    resp = client.get(f"{API_PREFIX}/products?category=all")
    assert len(resp.get_json()) == 3


def test_list_search_matches_name_or_description(client, make_product):
    ids = _seed_timeline(make_product)
    resp = client.get(f"{API_PREFIX}/products?search=Chemise")
    assert [p['id'] for p in resp.get_json()] == [ids['old']]

    resp = client.get(f"{API_PREFIX}/products?search=motifs")
    assert [p['id'] for p in resp.get_json()] == [ids['new']]


def test_list_search_ignores_case(client, make_product):
    ids = _seed_timeline(make_product)
    # "Parfum Floral" by name, "motifs floraux" by description
    for term in ('Flora', 'flora', 'FLORA'):
        resp = client.get(f"{API_PREFIX}/products?search={term}")
        assert [p['id'] for p in resp.get_json()] == [ids['new'], ids['mid']]

    resp = client.get(f"{API_PREFIX}/products?search=CHEMISE")
    assert [p['id'] for p in resp.get_json()] == [ids['old']]


def test_list_limit_and_offset(client, make_product):
    ids = _seed_timeline(make_product)
    resp = client.get(f"{API_PREFIX}/products?limit=1&offset=1")
    assert [p['id'] for p in resp.get_json()] == [ids['mid']]

    resp = client.get(f"{API_PREFIX}/products?offset=2")
    assert [p['id'] for p in resp.get_json()] == [ids['old']]


def test_list_rejects_bad_paging(client):
    assert client.get(f"{API_PREFIX}/products?limit=abc").status_code == 400
    assert client.get(f"{API_PREFIX}/products?offset=-1").status_code == 400


def test_get_product_shape(client, make_product):
    pid = make_product('Foulard', price=32500, sale_price=24500, category='accessories')
    resp = client.get(f"{API_PREFIX}/products/{pid}")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['id'] == pid
    assert data['price'] == 32500
    assert data['salePrice'] == 24500
    assert data['imageUrl'] == '/uploads/p.jpg'
    assert data['createdAt']


def test_get_unknown_product(client):
    resp = client.get(f"{API_PREFIX}/products/does-not-exist")
    assert resp.status_code == 404
    assert resp.get_json()['message'] == 'Produit non trouvé'


def test_admin_creates_product(client, app, admin_token):
    resp = client.post(f"{API_PREFIX}/products", json=_payload(salePrice=120000), headers=_auth(admin_token))
    assert resp.status_code == 201
    data = resp.get_json()
    assert data['name'] == 'Sac en Cuir'
    assert data['salePrice'] == 120000
    with app.app_context():
        assert db.session.get(Product, data['id']) is not None


def test_create_product_validation(client, admin_token):
    resp = client.post(
        f"{API_PREFIX}/products",
        json=_payload(price=0, category='shoes'),
        headers=_auth(admin_token),
    )
    assert resp.status_code == 400
    fields = {d['field'] for d in resp.get_json()['details']}
    assert {'price', 'category'} <= fields

    resp = client.post(f"{API_PREFIX}/products", json={'name': 'x'}, headers=_auth(admin_token))
    assert resp.status_code == 400


def test_non_admin_cannot_mutate(client, user_token, make_product):
    pid = make_product()
    assert client.post(f"{API_PREFIX}/products", json=_payload(), headers=_auth(user_token)).status_code == 403
    assert client.patch(f"{API_PREFIX}/products/{pid}", json={'price': 1}, headers=_auth(user_token)).status_code == 403
    assert client.delete(f"{API_PREFIX}/products/{pid}", headers=_auth(user_token)).status_code == 403
    assert client.post(f"{API_PREFIX}/products", json=_payload()).status_code == 401


def test_patch_updates_only_given_fields(client, admin_token, make_product):
    pid = make_product('Parfum', price=60000, materials='Huiles')
    resp = client.patch(
        f"{API_PREFIX}/products/{pid}",
        json={'salePrice': 44500},
        headers=_auth(admin_token),
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['salePrice'] == 44500
    assert data['price'] == 60000
    assert data['name'] == 'Parfum'
    assert data['materials'] == 'Huiles'


def test_patch_null_clears_sale_price(client, admin_token, make_product):
    pid = make_product('Parfum', price=60000, sale_price=44500)
    resp = client.patch(
        f"{API_PREFIX}/products/{pid}",
        json={'salePrice': None, 'name': None},
        headers=_auth(admin_token),
    )
    assert resp.status_code == 200
    assert resp.get_json()['salePrice'] is None
    assert resp.get_json()['name'] == 'Parfum'


def test_patch_invalid_and_unknown(client, admin_token, make_product):
    pid = make_product()
    resp = client.patch(f"{API_PREFIX}/products/{pid}", json={'price': -5}, headers=_auth(admin_token))
    assert resp.status_code == 400
    resp = client.patch(f"{API_PREFIX}/products/missing", json={'price': 5}, headers=_auth(admin_token))
    assert resp.status_code == 404


def test_delete_product(client, app, admin_token, make_product):
    pid = make_product()
    resp = client.delete(f"{API_PREFIX}/products/{pid}", headers=_auth(admin_token))
    assert resp.status_code == 200
    assert resp.get_json() == {'success': True}

    resp = client.delete(f"{API_PREFIX}/products/{pid}", headers=_auth(admin_token))
    assert resp.status_code == 404
    assert resp.get_json()['message'] == 'Produit non trouvé'


def test_delete_product_removes_cart_lines(client, app, admin_token, make_user, make_product):
    _, token = make_user('carol')
    pid = make_product()
    client.post(f"{API_PREFIX}/cart", json={'productId': pid, 'quantity': 2}, headers=_auth(token))

    resp = client.delete(f"{API_PREFIX}/products/{pid}", headers=_auth(admin_token))
    assert resp.status_code == 200
    with app.app_context():
        assert CartItem.query.filter_by(product_id=pid).count() == 0
    assert client.get(f"{API_PREFIX}/cart", headers=_auth(token)).get_json() == []
