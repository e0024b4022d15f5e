from flask import Blueprint, request, jsonify
from app.version import API_PREFIX
from app.exceptions import NotFoundError
from app.schemas.product import ProductCreate, ProductPatch, ProductQuery
from app.services import catalog
from app.utils import auth_required, admin_required, parse, transactional, validate_schema

products_bp = Blueprint("products", __name__, url_prefix=f"{API_PREFIX}/products")


@products_bp.route("", methods=["GET"])
def list_products():
    """List the catalog, newest first.
    ---
    tags:
      - Catalog
    parameters:
      - {in: query, name: category, type: string, description: "clothes, perfumes, accessories or all"}
      - {in: query, name: search, type: string}
      - {in: query, name: limit, type: integer}
      - {in: query, name: offset, type: integer}
    responses:
      200:
        description: Array of products
    """
    filters = parse(ProductQuery, request.args.to_dict())
    return jsonify([p.to_dict() for p in catalog.list_products(filters)]), 200


@products_bp.route("/<string:product_id>", methods=["GET"])
def get_product(product_id):
    return jsonify(catalog.get_product(product_id).to_dict()), 200


@products_bp.route("", methods=["POST"])
@auth_required
@admin_required
@validate_schema(ProductCreate)
def create_product():
    with transactional("Failed to create product"):
        product = catalog.create_product(request.validated_data)
    return jsonify(product.to_dict()), 201


@products_bp.route("/<string:product_id>", methods=["PATCH"])
@auth_required
@admin_required
def update_product(product_id):
    patch = parse(ProductPatch, request.get_json(silent=True))
    with transactional("Failed to update product"):
        product = catalog.update_product(product_id, patch)
    return jsonify(product.to_dict()), 200


@products_bp.route("/<string:product_id>", methods=["DELETE"])
@auth_required
@admin_required
def delete_product(product_id):
    with transactional("Failed to delete product"):
        deleted = catalog.delete_product(product_id)
    if not deleted:
        raise NotFoundError("Produit non trouvé")
    return jsonify({"success": True}), 200
