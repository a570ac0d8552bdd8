from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class CacheBackend(Protocol):
    """
    Any TTL-capable key/value cache.

    Calls may be remote and may fail or time out; LastValueStore absorbs that.
    """

    def get(self, key: str) -> Any:
        ...

    def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        ...


class LastValueStore:
    """
    Fail-open facade over a CacheBackend.

    - get(): a backend error is a cache miss
    - put(): a backend error is logged and reported as False, never raised
    """

    def __init__(self, backend: CacheBackend, ttl_seconds: int = 3600) -> None:
        self.backend = backend
        self.ttl_seconds = int(ttl_seconds)

    def get(self, key: str) -> Any:
        try:
            value = self.backend.get(key)
        except Exception:
            logger.warning("last-value cache read failed for %s; treating as miss", key, exc_info=True)
            return None

        logger.debug("last-value cache %s for %s", "miss" if value is None else "hit", key)
        return value

    def put(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> bool:
        ttl = self.ttl_seconds if ttl_seconds is None else int(ttl_seconds)
        try:
            self.backend.put(key, value, ttl)
        except Exception:
            logger.warning("last-value cache write failed for %s; value not remembered", key, exc_info=True)
            return False

        logger.debug("remembered last value for %s (ttl=%ss)", key, ttl)
        return True
