"""Python data layer for the storefront API.

``ApiClient`` wraps the HTTP API, ``QueryCache`` mirrors server state per
query key and is invalidated explicitly after each mutation, and
``pricing`` holds the display helpers the pages rely on.
"""
from .api import ApiClient, ApiError, build_url
from .cache import QueryCache
from .tokens import TokenStore
from .pricing import (
    effective_price,
    format_price,
    parse_price,
    filter_by_price_range,
    sort_products,
    cart_summary,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "build_url",
    "QueryCache",
    "TokenStore",
    "effective_price",
    "format_price",
    "parse_price",
    "filter_by_price_range",
    "sort_products",
    "cart_summary",
]
