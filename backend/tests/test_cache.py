# backend/tests/test_cache.py

from famapp.core.cache import TTLCache
from fakes import FakeClock


def test_miss_then_hit():
    cache = TTLCache(clock=FakeClock())
    assert cache.get("weather_1.00_2.00") == (False, None)

    cache.set("weather_1.00_2.00", {"ok": True}, ttl_seconds=60)
    assert cache.get("weather_1.00_2.00") == (True, {"ok": True})


def test_cached_none_is_a_hit():
    cache = TTLCache(clock=FakeClock())
    cache.set("country_atlantis", None, ttl_seconds=60)
    assert cache.get("country_atlantis") == (True, None)


def test_expired_entry_is_miss_and_evicted():
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("k", "v", ttl_seconds=10)

    clock.advance(10)   # valid only while now < expires_at
    assert cache.get("k") == (False, None)
    assert len(cache) == 0


def test_stats_counts_prefixes_and_expired_without_evicting():
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("weather_a", 1, ttl_seconds=100)
    cache.set("holiday_FR_2025", [], ttl_seconds=100)
    cache.set("country_spain", None, ttl_seconds=5)

    clock.advance(6)
    stats = cache.stats(("weather_", "holiday_", "country_"))

    assert stats == {"total": 3, "expired": 1, "weather_": 1, "holiday_": 1, "country_": 0}
    assert len(cache) == 3


def test_cleanup_and_clear():
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("a", 1, ttl_seconds=5)
    cache.set("b", 2, ttl_seconds=50)

    clock.advance(10)
    assert cache.cleanup() == 1
    assert cache.get("b") == (True, 2)

    cache.clear()
    assert len(cache) == 0
