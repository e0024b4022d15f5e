import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')

from models import db
from extensions import limiter


@pytest.fixture(scope='session')
def app_instance():
    from app import create_app
    from app.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI='sqlite:///:memory:',
        SQLALCHEMY_TRACK_MODIFICATIONS=False
    )
    return app


@pytest.fixture(scope='function')
def app(app_instance, tmp_path):
    app_instance.config.update(
        UPLOAD_FOLDER=str(tmp_path / 'uploads'),
        MAX_UPLOAD_BYTES=5 * 1024 * 1024,
        MAX_CONTENT_LENGTH=16 * 1024 * 1024,
        CART_ENFORCE_OWNERSHIP=False,
    )
    limiter.reset()
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Create a user directly in the database; returns ``(user_id, token)``."""
    from models.user import User
    from app.utils import create_access_token, hash_password

    def _make(username='alice', email=None, password='secret123', is_admin=False):
        with app.app_context():
            user = User(
                username=username,
                email=email or f'{username}@example.com',
                password=hash_password(password),
                is_admin=is_admin,
            )
            db.session.add(user)
            db.session.commit()
            return user.id, create_access_token(user)

    return _make


@pytest.fixture
def make_product(app):
    from models.product import Product

    def _make(name='Parfum Floral', price=10000, sale_price=None, category='perfumes', **extra):
        with app.app_context():
            product = Product(
                name=name,
                description=extra.pop('description', f'{name} description'),
                price=price,
                sale_price=sale_price,
                category=category,
                image_url=extra.pop('image_url', '/uploads/p.jpg'),
                **extra,
            )
            db.session.add(product)
            db.session.commit()
            return product.id

    return _make


@pytest.fixture
def user_token(make_user):
    return make_user('alice')[1]


@pytest.fixture
def admin_token(make_user):
    return make_user('admin', email='admin@luxe.com', is_admin=True)[1]
