from functools import wraps
from typing import Iterable
from flask import request
from pydantic import ValidationError as SchemaError
from app.exceptions import ValidationError


def has_required_fields(data: dict, required: Iterable[str]) -> bool:
    """Return True if all required fields are present in the given dict."""
    if not isinstance(data, dict):
        return False
    return all(field in data for field in required)


def schema_errors(exc: SchemaError):
    """Flatten pydantic errors into ``[{"field": ..., "message": ...}]``."""
    details = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ())) or "__root__"
        details.append({"field": field, "message": err.get("msg", "invalid")})
    return details


def parse(schema, data, message="Données invalides"):
    """Validate ``data`` against a pydantic schema or raise ValidationError."""
    try:
        return schema.model_validate(data if data is not None else {})
    except SchemaError as se:
        raise ValidationError(message, details=schema_errors(se))


def validate_schema(schema):
    """Decorator to validate request JSON against a Pydantic schema."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            request.validated_data = parse(schema, request.get_json(silent=True))
            return fn(*args, **kwargs)
        return wrapper

    return decorator
