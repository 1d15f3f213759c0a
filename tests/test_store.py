# Tests for store.py: TTL store and basket store.
# Created: 2026-10-19

import re
from unittest.mock import patch

import pytest

from scango.store import BasketStore, TTLStore


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ttl_store(clock):
    return TTLStore(clock=clock)


class TestTTLStore:
    def test_put_and_get(self, ttl_store):
        ttl_store.put("k", {"a": 1}, ttl=60)
        assert ttl_store.get("k") == {"a": 1}

    def test_get_missing(self, ttl_store):
        assert ttl_store.get("nope") is None

    def test_expires_lazily_on_read(self, ttl_store, clock):
        ttl_store.put("k", "v", ttl=60)
        clock.advance(59)
        assert ttl_store.get("k") == "v"
        clock.advance(1)
        assert ttl_store.get("k") is None
        assert len(ttl_store) == 0

    def test_put_overwrites_and_resets_ttl(self, ttl_store, clock):
        ttl_store.put("k", "old", ttl=10)
        clock.advance(5)
        ttl_store.put("k", "new", ttl=10)
        clock.advance(8)
        assert ttl_store.get("k") == "new"

    def test_evict_expired(self, ttl_store, clock):
        ttl_store.put("short", 1, ttl=10)
        ttl_store.put("long", 2, ttl=100)
        clock.advance(50)
        assert ttl_store.evict_expired() == 1
        assert len(ttl_store) == 1
        assert ttl_store.get("long") == 2

    def test_delete(self, ttl_store):
        ttl_store.put("k", 1, ttl=10)
        assert ttl_store.delete("k") is True
        assert ttl_store.delete("k") is False
        assert "k" not in ttl_store


class TestBasketStore:
    def test_create_and_get(self, clock):
        store = BasketStore(ttl_seconds=3600, store=TTLStore(clock=clock))
        basket = store.create([{"barcode": "123", "quantity": 2}])
        assert re.fullmatch(r"SG-\d{5}", basket.code)
        assert 10000 <= int(basket.code[3:]) <= 99999
        assert store.get(basket.code).items == [{"barcode": "123", "quantity": 2}]

    def test_basket_expires(self, clock):
        store = BasketStore(ttl_seconds=3600, store=TTLStore(clock=clock))
        basket = store.create([{"barcode": "123", "quantity": 1}])
        clock.advance(3600)
        assert store.get(basket.code) is None

    def test_code_collision_regenerates(self, clock):
        store = BasketStore(store=TTLStore(clock=clock))
        with patch("scango.store.secrets.randbelow", side_effect=[5, 5, 7]):
            first = store.create([{"barcode": "a", "quantity": 1}])
            second = store.create([{"barcode": "b", "quantity": 1}])
        assert first.code == "SG-10005"
        assert second.code == "SG-10007"
        assert len(store) == 2

    def test_create_evicts_stale_baskets(self, clock):
        store = BasketStore(ttl_seconds=10, store=TTLStore(clock=clock))
        store.create([{"barcode": "a", "quantity": 1}])
        clock.advance(11)
        store.create([{"barcode": "b", "quantity": 1}])
        assert len(store) == 1
