from flask import Blueprint, request, jsonify, current_app, g
from flask_limiter.util import get_remote_address
from extensions import limiter
from app.version import API_PREFIX
from app.exceptions import ValidationError
from app.schemas.auth import RegisterRequest, LoginRequest
from app.services.auth import register_user, authenticate, get_current_user
from app.utils import auth_required, has_required_fields, parse, transactional, validate_schema

auth_bp = Blueprint("auth", __name__, url_prefix=f"{API_PREFIX}/auth")


@auth_bp.route("/register", methods=["POST"])
@validate_schema(RegisterRequest)
def register():
    """Create an account and open a session.
    ---
    tags:
      - Auth
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [username, email, password]
          properties:
            username: {type: string}
            email: {type: string}
            password: {type: string}
    responses:
      200:
        description: The public user fields and a bearer token
      400:
        description: Invalid data, or email/username already taken
    """
    with transactional("Failed to register user"):
        session = register_user(request.validated_data)
    return jsonify(session), 200


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["LOGIN_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Trop de tentatives de connexion, veuillez réessayer plus tard",
)
def login():
    """Exchange email and password for a bearer token.
    ---
    tags:
      - Auth
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [email, password]
          properties:
            email: {type: string}
            password: {type: string}
    responses:
      200:
        description: The public user fields and a bearer token
      401:
        description: Email ou mot de passe incorrect
      429:
        description: Too many attempts from this address
    """
    body = request.get_json(silent=True) or {}
    if not has_required_fields(body, ("email", "password")) or not body["email"] or not body["password"]:
        raise ValidationError("Email et mot de passe requis")
    return jsonify(authenticate(parse(LoginRequest, body))), 200


@auth_bp.route("/me", methods=["GET"])
@auth_required
def me():
    user = get_current_user(g.user)
    return jsonify(user.to_public_dict()), 200
