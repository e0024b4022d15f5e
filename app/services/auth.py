import logging
from models import db
from models.user import User
from app.exceptions import AuthError, ConflictError, NotFoundError
from app.schemas.auth import RegisterRequest, LoginRequest
from app.utils.jwt import create_access_token
from app.utils.passwords import hash_password, verify_password

# Same text for unknown email and wrong password so accounts cannot be enumerated
BAD_CREDENTIALS = "Email ou mot de passe incorrect"


def _session_payload(user: User) -> dict:
    return {"user": user.to_public_dict(), "token": create_access_token(user)}


def register_user(data: RegisterRequest) -> dict:
    if User.query.filter_by(email=data.email).first():
        raise ConflictError("Cet email est déjà utilisé")
    if User.query.filter_by(username=data.username).first():
        raise ConflictError("Ce nom d'utilisateur est déjà pris")

    user = User(
        username=data.username,
        email=data.email,
        password=hash_password(data.password),
        is_admin=False,
    )
    db.session.add(user)
    db.session.flush()
    logging.info("user registered: %s", user.id)
    return _session_payload(user)


def authenticate(data: LoginRequest) -> dict:
    user = User.query.filter_by(email=data.email).first()
    if not user or not verify_password(user.password, data.password):
        logging.warning("failed login attempt")
        raise AuthError(BAD_CREDENTIALS)
    return _session_payload(user)


def get_current_user(identity: dict) -> User:
    user = db.session.get(User, identity.get("id"))
    if not user:
        raise NotFoundError("Utilisateur non trouvé")
    return user


__all__ = [
    "BAD_CREDENTIALS",
    "register_user",
    "authenticate",
    "get_current_user",
]
