from __future__ import annotations

import time
from threading import RLock
from typing import Any, Callable, Dict, Optional, Tuple


class InMemoryCache:
    """
    Process-local TTL cache implementing CacheBackend.

    Entries expire lazily: an expired entry is dropped when read, or by
    purge_expired(). The clock is injectable so tests can move time.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._lock = RLock()
        self._clock = clock or time.monotonic
        self._data: Dict[str, Tuple[Any, float]] = {}

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._data[key]
                return None
            return value

    def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        with self._lock:
            self._data[key] = (value, self._clock() + ttl_seconds)

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [k for k, (_, exp) in self._data.items() if now >= exp]
            for k in expired:
                del self._data[k]
        return len(expired)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
