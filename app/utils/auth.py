from functools import wraps
from flask import request, g
from .responses import error
from .jwt import decode_token, TokenError


def auth_required(func):
    """Reject the request with 401 unless it carries a valid bearer token.

    The decoded claims become the request identity (``g.user``); storage is
    not consulted.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        auth = request.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return error("Non autorisé - Aucun token fourni", status=401)
        token = auth.split(" ", 1)[1].strip()
        try:
            payload = decode_token(token)
        except TokenError:
            return error("Non autorisé - Token invalide", status=401)

        g.user = payload
        return func(*args, **kwargs)

    return wrapper


def admin_required(fn):
    """Reject with 403 unless the identity set by ``auth_required`` is an admin."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = getattr(g, "user", None)
        if not user or not user.get("isAdmin"):
            return error("Accès interdit - Privilèges admin requis", status=403)
        return fn(*args, **kwargs)

    return wrapper
