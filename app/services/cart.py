from typing import List, Optional
from sqlalchemy.orm import contains_eager
from models import db
from models.cart import CartItem
from models.product import Product
from app.exceptions import NotFoundError, ValidationError


def get_cart(user_id: str) -> List[CartItem]:
    """Cart rows joined with their product, so one query serves the cart page."""
    return (
        CartItem.query.join(Product, CartItem.product_id == Product.id)
        .options(contains_eager(CartItem.product))
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.added_at.asc())
        .all()
    )


def add_to_cart(user_id: str, product_id: str, quantity: int = 1) -> CartItem:
    """Insert a cart row, or merge into the existing row for the same product.

    Read-then-write: two concurrent identical requests may race.
    """
    if quantity is None or quantity < 1:
        raise ValidationError("Quantité invalide")
    if not db.session.get(Product, product_id):
        raise NotFoundError("Produit non trouvé")

    cart_item = CartItem.query.filter_by(user_id=user_id, product_id=product_id).first()
    if cart_item:
        cart_item.quantity = cart_item.quantity + quantity
    else:
        cart_item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
        db.session.add(cart_item)
    db.session.flush()
    return cart_item


def _find_item(item_id: str, owner_id: Optional[str]) -> Optional[CartItem]:
    query = CartItem.query.filter_by(id=item_id)
    if owner_id is not None:
        query = query.filter_by(user_id=owner_id)
    return query.first()


def update_quantity(item_id: str, quantity, owner_id: Optional[str] = None) -> CartItem:
    """Set an absolute quantity.

    Ownership is only checked when ``owner_id`` is given.
    """
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
        raise ValidationError("Quantité invalide")
    cart_item = _find_item(item_id, owner_id)
    if not cart_item:
        raise NotFoundError("Article non trouvé")
    cart_item.quantity = quantity
    db.session.flush()
    return cart_item


def remove_from_cart(item_id: str, owner_id: Optional[str] = None) -> bool:
    cart_item = _find_item(item_id, owner_id)
    if not cart_item:
        return False
    db.session.delete(cart_item)
    return True


def clear_cart(user_id: str) -> bool:
    deleted = CartItem.query.filter_by(user_id=user_id).delete()
    return deleted > 0


__all__ = [
    "get_cart",
    "add_to_cart",
    "update_quantity",
    "remove_from_cart",
    "clear_cart",
]
