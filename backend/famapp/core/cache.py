# backend/famapp/core/cache.py

import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

from pydantic import BaseModel


class CacheEntry(BaseModel):
    payload: Any = None
    created_at: float
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class TTLCache:
    """
    In-memory key/value cache where every entry carries its own expiry.

    Expired entries count as misses and are evicted lazily on lookup;
    `cleanup()` sweeps them explicitly. A stored `None` is a hit, so
    `get()` returns a `(hit, payload)` pair instead of overloading `None`.

    All access goes through one lock: the task pipeline runs blocking
    fetches on worker threads that share this cache.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Tuple[bool, Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False, None
            if entry.is_valid(self._clock()):
                return True, entry.payload
            del self._entries[key]
            return False, None

    def set(self, key: str, payload: Any, ttl_seconds: float) -> None:
        now = self._clock()
        entry = CacheEntry(payload=payload, created_at=now, expires_at=now + ttl_seconds)
        with self._lock:
            self._entries[key] = entry

    def stats(self, prefixes: Tuple[str, ...] = ()) -> Dict[str, int]:
        """
        Count live entries per key prefix plus expired entries.
        Expired entries are counted, not evicted.
        """
        now = self._clock()
        counts = {prefix: 0 for prefix in prefixes}
        expired = 0

        with self._lock:
            total = len(self._entries)
            for key, entry in self._entries.items():
                if not entry.is_valid(now):
                    expired += 1
                    continue
                for prefix in prefixes:
                    if key.startswith(prefix):
                        counts[prefix] += 1
                        break

        return {"total": total, "expired": expired, **counts}

    def cleanup(self) -> int:
        now = self._clock()
        with self._lock:
            stale = [key for key, entry in self._entries.items() if not entry.is_valid(now)]
            for key in stale:
                del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
