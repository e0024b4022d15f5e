import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from .cache import QueryCache, QueryKey
from .tokens import TokenStore
from .types import CartItem, CartLine, Order, Product, Session, User

logger = logging.getLogger(__name__)

AUTH_ME = ("/api/auth/me",)
PRODUCTS = ("/api/products",)
CART = ("/api/cart",)
ORDERS = ("/api/orders",)


class ApiError(Exception):
    def __init__(self, status: int, text: str):
        super().__init__(f"{status}: {text}")
        self.status = status
        self.text = text


def build_url(key: QueryKey) -> str:
    """URL for a query key.

    The first element is the base path. A mapping in second position becomes
    the query string (None values skipped); otherwise the string elements are
    joined as path segments.
    """
    url = key[0]
    if len(key) > 1 and isinstance(key[1], Mapping):
        params = {k: v for k, v in key[1].items() if v is not None}
        query = urlencode(params)
        if query:
            url += ("&" if "?" in url else "?") + query
    elif len(key) > 1:
        url = "/".join(str(k) for k in key if isinstance(k, str))
    return url


class ApiClient:
    def __init__(
        self,
        base_url: str = "",
        token_store: Optional[TokenStore] = None,
        cache: Optional[QueryCache] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
    ):
        self.base_url = base_url.rstrip("/")
        self.tokens = token_store or TokenStore()
        self.cache = cache or QueryCache()
        self.session = session or requests.Session()
        self.timeout = timeout

    # --- transport ---

    def _auth_headers(self) -> Dict[str, str]:
        token = self.tokens.get()
        return {"Authorization": f"Bearer {token}"} if token else {}

    @staticmethod
    def _raise_if_not_ok(resp: requests.Response) -> None:
        if not resp.ok:
            raise ApiError(resp.status_code, resp.text or resp.reason)

    def request(self, path: str, method: str = "GET", json: Any = None, files=None) -> Any:
        """Send a request and decode its JSON body.

        ``json`` bodies are sent as application/json; ``files`` go out as
        multipart and let requests pick the boundary. Empty bodies give None.
        """
        url = f"{self.base_url}{path}"
        logger.info("ApiClient %s %s", method, url)
        resp = self.session.request(
            method,
            url,
            headers=self._auth_headers(),
            json=json,
            files=files,
            timeout=self.timeout,
        )
        self._raise_if_not_ok(resp)
        if resp.status_code == 204 or resp.headers.get("Content-Length") == "0":
            return None
        return resp.json() if resp.text else None

    def fetch_query(self, key: QueryKey, on_401: str = "throw") -> Any:
        resp = self.session.get(
            f"{self.base_url}{build_url(key)}",
            headers=self._auth_headers(),
            timeout=self.timeout,
        )
        if on_401 == "return_null" and resp.status_code == 401:
            return None
        self._raise_if_not_ok(resp)
        return resp.json()

    def query(self, key: QueryKey, on_401: str = "throw") -> Any:
        return self.cache.get_or_fetch(key, lambda: self.fetch_query(key, on_401))

    # --- auth ---

    def _open_session(self, session: Session) -> Session:
        self.tokens.set(session["token"])
        self.cache.invalidate(AUTH_ME)
        self.cache.invalidate(CART)
        self.cache.invalidate(ORDERS)
        return session

    def register(self, username: str, email: str, password: str) -> Session:
        return self._open_session(
            self.request("/api/auth/register", "POST", {"username": username, "email": email, "password": password})
        )

    def login(self, email: str, password: str) -> Session:
        return self._open_session(
            self.request("/api/auth/login", "POST", {"email": email, "password": password})
        )

    def logout(self) -> None:
        self.tokens.clear()
        self.cache.invalidate(AUTH_ME)
        self.cache.invalidate(CART)
        self.cache.invalidate(ORDERS)

    def me(self) -> Optional[User]:
        return self.query(AUTH_ME, on_401="return_null")

    # --- catalog ---

    def products(self, category: Optional[str] = None, search: Optional[str] = None,
                 limit: Optional[int] = None, offset: Optional[int] = None) -> List[Product]:
        params = {
            "category": None if category == "all" else category,
            "search": search,
            "limit": limit,
            "offset": offset,
        }
        if all(v is None for v in params.values()):
            return self.query(PRODUCTS)
        return self.query(PRODUCTS + (params,))

    def product(self, product_id: str) -> Product:
        return self.query(PRODUCTS + (product_id,))

    def create_product(self, fields: Dict[str, Any]) -> Product:
        product = self.request("/api/products", "POST", fields)
        self.cache.invalidate(PRODUCTS)
        return product

    def update_product(self, product_id: str, patch: Dict[str, Any]) -> Product:
        product = self.request(f"/api/products/{product_id}", "PATCH", patch)
        self.cache.invalidate(PRODUCTS)
        return product

    def delete_product(self, product_id: str) -> bool:
        result = self.request(f"/api/products/{product_id}", "DELETE")
        self.cache.invalidate(PRODUCTS)
        self.cache.invalidate(CART)
        return bool(result and result.get("success"))

    def upload_image(self, filename: str, content: bytes, mimetype: str) -> str:
        result = self.request("/api/upload", "POST", files={"image": (filename, content, mimetype)})
        return result["imageUrl"]

    # --- cart ---

    def cart(self) -> List[CartLine]:
        return self.query(CART)

    def add_to_cart(self, product_id: str, quantity: int = 1) -> CartItem:
        item = self.request("/api/cart", "POST", {"productId": product_id, "quantity": quantity})
        self.cache.invalidate(CART)
        return item

    def update_cart_item(self, item_id: str, quantity: int) -> CartItem:
        item = self.request(f"/api/cart/{item_id}", "PATCH", {"quantity": quantity})
        self.cache.invalidate(CART)
        return item

    def remove_cart_item(self, item_id: str) -> bool:
        result = self.request(f"/api/cart/{item_id}", "DELETE")
        self.cache.invalidate(CART)
        return bool(result and result.get("success"))

    def clear_cart(self) -> bool:
        result = self.request("/api/cart", "DELETE")
        self.cache.invalidate(CART)
        return bool(result and result.get("success"))

    # --- orders ---

    def place_order(self, shipping: Dict[str, Any]) -> Order:
        order = self.request("/api/orders", "POST", shipping)
        self.cache.invalidate(CART)
        self.cache.invalidate(ORDERS)
        return order

    def orders(self) -> List[Order]:
        return self.query(ORDERS)

    def order(self, order_id: str) -> Order:
        return self.query(ORDERS + (order_id,))
