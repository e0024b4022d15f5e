from flask import Blueprint, request, jsonify, g
from app.version import API_PREFIX
from app.schemas.order import ShippingDetails
from app.services import orders as order_service
from app.utils import auth_required, transactional, validate_schema

orders_bp = Blueprint("orders", __name__, url_prefix=f"{API_PREFIX}/orders")


@orders_bp.route("", methods=["POST"])
@auth_required
@validate_schema(ShippingDetails)
def place_order():
    """Check out the current cart.
    ---
    tags:
      - Orders
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [shippingName, shippingAddress, shippingCity, shippingPhone]
          properties:
            shippingName: {type: string}
            shippingAddress: {type: string}
            shippingCity: {type: string}
            shippingPhone: {type: string}
            notes: {type: string}
    responses:
      201:
        description: The order with its snapshot items
      400:
        description: Empty cart or invalid shipping details
    """
    with transactional("Order creation failed"):
        order = order_service.create_order(g.user["id"], request.validated_data)
    return jsonify(order.to_dict(with_items=True)), 201


@orders_bp.route("", methods=["GET"])
@auth_required
def order_history():
    orders = order_service.list_user_orders(g.user["id"])
    return jsonify([o.to_dict() for o in orders]), 200


@orders_bp.route("/<string:order_id>", methods=["GET"])
@auth_required
def order_detail(order_id):
    order = order_service.get_order(order_id, g.user)
    return jsonify(order.to_dict(with_items=True)), 200
