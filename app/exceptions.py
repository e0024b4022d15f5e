class StoreError(Exception):
    """Base for failures that map to a client-facing HTTP status."""

    status = 400

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(StoreError):
    status = 400


class ConflictError(StoreError):
    # duplicates answer 400, like every other rejected input
    status = 400


class AuthError(StoreError):
    status = 401


class ForbiddenError(StoreError):
    status = 403


class NotFoundError(StoreError):
    status = 404


__all__ = [
    "StoreError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "ForbiddenError",
    "NotFoundError",
]
