from typing import List, Tuple
from flask import current_app
from models import db
from models.cart import CartItem
from models.order import Order, OrderItem
from app.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.schemas.order import ShippingDetails
from app.services.cart import get_cart


def shipping_for(subtotal: int) -> int:
    cfg = current_app.config
    return 0 if subtotal >= cfg["FREE_SHIPPING_THRESHOLD"] else cfg["FLAT_SHIPPING_COST"]


def price_cart(cart_items: List[CartItem]) -> Tuple[int, int, int]:
    """Return ``(subtotal, shipping, total)`` using each product's effective price."""
    subtotal = sum(ci.product.effective_price * ci.quantity for ci in cart_items)
    shipping = shipping_for(subtotal)
    return subtotal, shipping, subtotal + shipping


def create_order(user_id: str, shipping: ShippingDetails) -> Order:
    """Turn the user's cart into an order with snapshot items, then empty the cart.

    Runs inside the caller's transaction, so the order, its items and the cart
    clear are committed or rolled back together. This is a deliberate choice
    over inserting the order, each item and the cart clear as separate writes,
    where a failure midway would leave a partial order behind a full cart.
    """
    cart_items = get_cart(user_id)
    if not cart_items:
        raise ValidationError("Le panier est vide")

    subtotal, shipping_cost, total_amount = price_cart(cart_items)

    new_order = Order(
        user_id=user_id,
        total_amount=total_amount,
        shipping_cost=shipping_cost,
        **shipping.model_dump(),
    )
    db.session.add(new_order)
    db.session.flush()

    for ci in cart_items:
        new_order.items.append(
            OrderItem(
                product_id=ci.product_id,
                product_name=ci.product.name,
                product_price=ci.product.effective_price,
                quantity=ci.quantity,
            )
        )

    CartItem.query.filter_by(user_id=user_id).delete()
    db.session.flush()
    return new_order


def get_order(order_id: str, identity: dict) -> Order:
    order = db.session.get(Order, order_id)
    if not order:
        raise NotFoundError("Commande non trouvée")
    if order.user_id != identity.get("id") and not identity.get("isAdmin"):
        raise ForbiddenError("Accès interdit")
    return order


def list_user_orders(user_id: str) -> List[Order]:
    return (
        Order.query.filter_by(user_id=user_id)
        .order_by(Order.created_at.desc())
        .all()
    )


__all__ = [
    "shipping_for",
    "price_cart",
    "create_order",
    "get_order",
    "list_user_orders",
]
