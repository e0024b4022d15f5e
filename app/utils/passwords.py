from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(password: str) -> str:
    """Salted one-way hash; the method and salt are embedded in the result."""
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    if not password_hash or password is None:
        return False
    return check_password_hash(password_hash, password)
