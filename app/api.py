from flask import jsonify
from app.routes import (
    auth_bp,
    products_bp,
    upload_bp,
    cart_bp,
    orders_bp,
)
from app.version import API_PREFIX


def register_api(app):
    """Register blueprint routes under the API prefix."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(upload_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(orders_bp)

    @app.route(f"{API_PREFIX}/health")
    def health():
        return jsonify({"status": "ok"}), 200
