import io
import os
from app.version import API_PREFIX
from app.services.uploads import stored_filename

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 64


def _auth(token):
    return {'Authorization': f'Bearer {token}'}


def upload(client, token, content=PNG_BYTES, filename='Photo Sac.png', mimetype='image/png'):
    return client.post(
        f"{API_PREFIX}/upload",
        data={'image': (io.BytesIO(content), filename, mimetype)},
        headers=_auth(token),
        content_type='multipart/form-data',
    )


def test_upload_stores_and_serves_image(client, app, admin_token):
    resp = upload(client, admin_token)
    assert resp.status_code == 200
    url = resp.get_json()['imageUrl']
    assert url.startswith('/uploads/photo-sac-')
    assert url.endswith('.png')

    stored = os.path.join(app.config['UPLOAD_FOLDER'], url.rsplit('/', 1)[1])
    assert os.path.exists(stored)

    served = client.get(url)
    assert served.status_code == 200
    assert served.data == PNG_BYTES
    served.close()


def test_upload_rejects_other_types(client, admin_token):
    resp = upload(client, admin_token, content=b'GIF89a', filename='anim.gif', mimetype='image/gif')
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Type de fichier non autorisé. Utilisez JPG, PNG ou WebP'


def test_upload_rejects_large_files(client, app, admin_token):
    app.config['MAX_UPLOAD_BYTES'] = 16
    resp = upload(client, admin_token)
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Fichier trop volumineux (5 Mo maximum)'


def test_upload_without_file(client, admin_token):
    resp = client.post(f"{API_PREFIX}/upload", data={}, headers=_auth(admin_token),
                       content_type='multipart/form-data')
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Aucun fichier fourni'


def test_upload_is_admin_only(client, user_token):
    assert upload(client, user_token).status_code == 403
    assert client.post(f"{API_PREFIX}/upload").status_code == 401


def test_stored_filename_shape():
    name = stored_filename('Un Très Long Nom De Fichier Pour Le Produit.JPG')
    slug, rest = name[:30], name[30:]
    assert slug == 'un-tr-s-long-nom-de-fichier-po'
    assert rest.startswith('-')
    assert name.endswith('.jpg')
    assert stored_filename('a.png') != stored_filename('a.png')
