"""
Tests for the fault-tolerant cache service.
"""

from debate_core.repositories import MemoryCacheRepository
from debate_core.services import CacheService

from conftest import BrokenStore


def test_passes_through_to_store(cache):
    assert cache.set("k", "v", ttl=10) is True
    assert cache.get("k") == "v"
    assert cache.delete("k") is True
    assert cache.get("k") is None


def test_clear(cache):
    cache.set("a", 1, ttl=10)
    cache.clear()
    assert cache.get("a") is None


def test_store_faults_are_not_raised():
    """A failing store reads as a miss and writes as a no-op."""
    cache = CacheService(store=BrokenStore())
    assert cache.get("k") is None
    assert cache.set("k", "v", ttl=10) is False
    assert cache.delete("k") is False
    cache.clear()
    assert cache.get_stats() == {}
    assert cache.is_healthy() is False


def test_store_faults_are_logged(caplog):
    cache = CacheService(store=BrokenStore())
    with caplog.at_level("ERROR", logger="debate_core"):
        cache.get("some-key")
    assert "some-key" in caplog.text


def test_create_with_explicit_store():
    store = MemoryCacheRepository(default_ttl=60, check_period=0)
    cache = CacheService.create(store=store)
    assert cache.store is store
    assert cache.is_healthy() is True


def test_create_defaults_to_memory_backend():
    cache = CacheService.create()
    assert isinstance(cache.store, MemoryCacheRepository)
