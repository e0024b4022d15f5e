from .auth import auth_bp
from .products import products_bp
from .upload import upload_bp
from .cart import cart_bp
from .orders import orders_bp


__all__ = [
    'auth_bp',
    'products_bp',
    'upload_bp',
    'cart_bp',
    'orders_bp',
]
