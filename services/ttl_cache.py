"""
Thread-safe in-memory cache with per-entry time-to-live. Entries past their expiry are treated as absent
and evicted lazily; writes can be guarded by a request sequence number so older results never replace
newer ones.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass
class CacheEntry(Generic[T]):
    key: str
    value: T
    expires_at: float
    sequence: int = 0

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class TTLCache(Generic[T]):

    def __init__(self, default_ttl: float = 300.0, max_entries: int = 512,
                 clock: Callable[[], float] = time.monotonic):
        self.default_ttl = default_ttl
        self.max_entries = max_entries
        self._clock = clock
        self._entries: Dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()
        self.stats = {"hits": 0, "misses": 0, "writes": 0, "rejected_writes": 0, "evictions": 0}

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.stats["misses"] += 1
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                self.stats["evictions"] += 1
                self.stats["misses"] += 1
                return None
            self.stats["hits"] += 1
            return entry.value

    def set(self, key: str, value: T, ttl: Optional[float] = None, sequence: int = 0) -> bool:
        """Store value under key.

        Returns False without writing when a live entry for the key carries a
        newer sequence number than the one supplied.
        """
        ttl = self.default_ttl if ttl is None else ttl
        with self._lock:
            now = self._clock()
            current = self._entries.get(key)
            if current is not None and not current.is_expired(now) and current.sequence > sequence:
                self.stats["rejected_writes"] += 1
                return False
            if key not in self._entries and len(self._entries) >= self.max_entries:
                self._evict_one(now)
            self._entries[key] = CacheEntry(key=key, value=value, expires_at=now + ttl, sequence=sequence)
            self.stats["writes"] += 1
            return True

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def purge_expired(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for k in expired:
                del self._entries[k]
            self.stats["evictions"] += len(expired)
            return len(expired)

    def _evict_one(self, now: float) -> None:
        # caller holds the lock; prefer an expired entry, else the one closest to expiry
        victim = None
        for k, e in self._entries.items():
            if e.is_expired(now):
                victim = k
                break
            if victim is None or e.expires_at < self._entries[victim].expires_at:
                victim = k
        if victim is not None:
            del self._entries[victim]
            self.stats["evictions"] += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def describe(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._entries),
                "entries": list(self._entries.keys()),
                **self.stats,
            }
