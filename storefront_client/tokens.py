import json
import os
from typing import Optional


class TokenStore:
    """Keeps the bearer token, optionally persisted to a JSON file.

    The file holds a single ``{"auth_token": ...}`` mapping, the same key the
    browser client keeps in local storage.
    """

    KEY = "auth_token"

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._token: Optional[str] = None
        if path and os.path.exists(path):
            with open(path, encoding="utf-8") as fh:
                self._token = json.load(fh).get(self.KEY)

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token
        self._flush()

    def clear(self) -> None:
        self._token = None
        self._flush()

    def _flush(self) -> None:
        if not self.path:
            return
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump({self.KEY: self._token} if self._token else {}, fh)
