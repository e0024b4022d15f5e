from flask import Blueprint, request, jsonify, current_app, g
from app.version import API_PREFIX
from app.exceptions import NotFoundError
from app.schemas.cart import AddToCartRequest
from app.services import cart as cart_service
from app.utils import auth_required, transactional, validate_schema

cart_bp = Blueprint("cart", __name__, url_prefix=f"{API_PREFIX}/cart")


def _owner_filter():
    # Row ownership is only enforced when the deployment opts in
    if current_app.config.get("CART_ENFORCE_OWNERSHIP"):
        return g.user["id"]
    return None


@cart_bp.route("", methods=["GET"])
@auth_required
def view_cart():
    items = cart_service.get_cart(g.user["id"])
    return jsonify([ci.to_dict(with_product=True) for ci in items]), 200


@cart_bp.route("", methods=["POST"])
@auth_required
@validate_schema(AddToCartRequest)
def add_to_cart():
    data = request.validated_data
    with transactional("Failed to add to cart"):
        cart_item = cart_service.add_to_cart(g.user["id"], data.product_id, data.quantity)
    return jsonify(cart_item.to_dict()), 201


@cart_bp.route("/<string:item_id>", methods=["PATCH"])
@auth_required
def update_cart_quantity(item_id):
    data = request.get_json(silent=True) or {}
    with transactional("Failed to update cart quantity"):
        cart_item = cart_service.update_quantity(item_id, data.get("quantity"), owner_id=_owner_filter())
    return jsonify(cart_item.to_dict()), 200


@cart_bp.route("/<string:item_id>", methods=["DELETE"])
@auth_required
def remove_item(item_id):
    with transactional("Failed to remove cart item"):
        removed = cart_service.remove_from_cart(item_id, owner_id=_owner_filter())
    if not removed:
        raise NotFoundError("Article non trouvé")
    return jsonify({"success": True}), 200


@cart_bp.route("", methods=["DELETE"])
@auth_required
def clear_cart():
    with transactional("Failed to clear cart"):
        cart_service.clear_cart(g.user["id"])
    return jsonify({"success": True}), 200
