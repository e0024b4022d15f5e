import datetime as dt
from typing import Dict
import jwt
from flask import current_app


def _secret() -> str:
    return current_app.config["JWT_SECRET"]


def _utcnow():
    return dt.datetime.now(dt.timezone.utc)


class TokenError(Exception):
    pass


def create_access_token(user) -> str:
    """Sign a bearer token whose claims are the user's public identity."""
    cfg = current_app.config
    now = _utcnow()
    payload: Dict = {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "isAdmin": bool(user.is_admin),
        "iat": now,
        "exp": now + dt.timedelta(days=cfg["TOKEN_LIFETIME_DAYS"]),
    }
    return jwt.encode(payload, _secret(), algorithm="HS256")


def decode_token(token: str) -> Dict:
    try:
        data = jwt.decode(token, _secret(), algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        raise TokenError("token expired")
    except jwt.InvalidTokenError:
        raise TokenError("invalid token")

    if not data.get("id"):
        raise TokenError("invalid token")
    return data
