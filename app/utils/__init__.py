from .responses import ok, error
from .auth import auth_required, admin_required
from .validation import has_required_fields, validate_schema, parse
from .db import transactional
from .jwt import create_access_token, decode_token, TokenError
from .passwords import hash_password, verify_password

__all__ = [
    'ok',
    'error',
    'auth_required',
    'admin_required',
    'create_access_token',
    'decode_token',
    'TokenError',
    'has_required_fields',
    'validate_schema',
    'parse',
    'transactional',
    'hash_password',
    'verify_password',
]
