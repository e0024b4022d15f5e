import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Hashable, Sequence, Tuple

logger = logging.getLogger(__name__)

QueryKey = Sequence[Any]


def freeze(key: QueryKey) -> Tuple[Hashable, ...]:
    """Turn a query key into a hashable tuple; mappings become sorted item tuples."""
    frozen = []
    for part in key:
        if isinstance(part, Mapping):
            frozen.append(tuple(sorted((k, v) for k, v in part.items() if v is not None)))
        else:
            frozen.append(part)
    return tuple(frozen)


class QueryCache:
    """Key-value mirror of server responses.

    Entries never go stale on their own; callers invalidate by key prefix after
    every mutation, e.g. ``invalidate(["/api/cart"])``.
    """

    def __init__(self):
        self._entries: Dict[Tuple[Hashable, ...], Any] = {}

    def __contains__(self, key: QueryKey) -> bool:
        return freeze(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: QueryKey, default=None):
        return self._entries.get(freeze(key), default)

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[freeze(key)] = value

    def get_or_fetch(self, key: QueryKey, fetch: Callable[[], Any]) -> Any:
        frozen = freeze(key)
        if frozen not in self._entries:
            self._entries[frozen] = fetch()
        return self._entries[frozen]

    def invalidate(self, prefix: QueryKey) -> int:
        """Drop every entry whose key starts with ``prefix``; return how many."""
        frozen = freeze(prefix)
        stale = [k for k in self._entries if k[: len(frozen)] == frozen]
        for k in stale:
            del self._entries[k]
        if stale:
            logger.debug("invalidated %d cache entries under %r", len(stale), frozen)
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
