from flask import Blueprint, request, jsonify, current_app, send_from_directory
from app.version import API_PREFIX
from app.services.uploads import save_image
from app.utils import auth_required, admin_required

upload_bp = Blueprint("upload", __name__)


@upload_bp.route(f"{API_PREFIX}/upload", methods=["POST"])
@auth_required
@admin_required
def upload_image():
    """Store a product image (JPEG, PNG or WebP, 5 MB max).
    ---
    tags:
      - Catalog
    consumes:
      - multipart/form-data
    parameters:
      - {in: formData, name: image, type: file, required: true}
    responses:
      200:
        description: "{imageUrl: /uploads/<file>}"
      400:
        description: Missing file, wrong type or too large
    """
    image_url = save_image(request.files.get("image"))
    return jsonify({"imageUrl": image_url}), 200


@upload_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
