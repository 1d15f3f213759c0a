# Basket store: in-memory keyed store with per-entry TTL.
# Created: 2026-10-19
#
# Entries are evicted lazily when read and in bulk by evict_expired().
# Nothing is persisted; a restart drops every basket.

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

CODE_PREFIX = "SG-"


@dataclass
class _Entry(Generic[V]):
    value: V
    expires_at: float


class TTLStore(Generic[V]):
    """Keyed transient store where every value carries its own expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, _Entry[V]] = {}

    def put(self, key: str, value: V, ttl: float) -> None:
        self._entries[key] = _Entry(value, self._clock() + ttl)

    def get(self, key: str) -> V | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            return None
        return entry.value

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def evict_expired(self) -> int:
        """Drop every expired entry. Returns how many were removed."""
        now = self._clock()
        expired = [k for k, e in self._entries.items() if e.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class Basket:
    code: str
    items: list[dict[str, Any]]
    created_at: float = field(default_factory=time.time)


class BasketStore:
    """Baskets handed from a shopper's device to the till, keyed by code."""

    def __init__(self, ttl_seconds: float = 3600, store: TTLStore[Basket] | None = None):
        self.ttl_seconds = ttl_seconds
        self._store: TTLStore[Basket] = store if store is not None else TTLStore()

    def create(self, items: list[dict[str, Any]]) -> Basket:
        self._store.evict_expired()
        code = _new_code()
        while code in self._store:
            code = _new_code()
        basket = Basket(code=code, items=items)
        self._store.put(code, basket, self.ttl_seconds)
        logger.info("Basket %s created with %d item(s)", code, len(items))
        return basket

    def get(self, code: str) -> Basket | None:
        return self._store.get(code)

    def __len__(self) -> int:
        return len(self._store)


def _new_code() -> str:
    return f"{CODE_PREFIX}{10000 + secrets.randbelow(90000)}"


# Singleton
_basket_store: BasketStore | None = None


def get_basket_store() -> BasketStore:
    global _basket_store
    if _basket_store is None:
        from scango.config import get_settings

        _basket_store = BasketStore(ttl_seconds=get_settings().basket_ttl_seconds)
    return _basket_store


def reset_basket_store() -> None:
    global _basket_store
    _basket_store = None
