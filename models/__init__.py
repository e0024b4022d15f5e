import uuid

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def new_id() -> str:
    """Primary keys are random UUID4 strings, generated application-side."""
    return str(uuid.uuid4())


from models.user import User  # noqa: E402,F401
from models.product import Product  # noqa: E402,F401
from models.cart import CartItem  # noqa: E402,F401
from models.order import Order, OrderItem  # noqa: E402,F401
