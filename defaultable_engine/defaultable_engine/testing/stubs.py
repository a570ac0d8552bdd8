from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


class FakeClock:
    """Manually advanced clock for InMemoryCache(clock=...)."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingCache:
    """
    Deterministic CacheBackend stub.

    Ignores TTLs and keeps every call so tests can assert on what was read
    and written.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self.data: Dict[str, Any] = dict(initial or {})
        self.gets: List[str] = []
        self.puts: List[Tuple[str, Any, int]] = []

    def get(self, key: str) -> Any:
        self.gets.append(key)
        return self.data.get(key)

    def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        self.puts.append((key, value, ttl_seconds))
        self.data[key] = value


class FailingCache:
    """CacheBackend whose every call raises, like an unreachable remote cache."""

    def __init__(self, exc: Optional[BaseException] = None) -> None:
        self.exc = exc or TimeoutError("cache backend timed out")
        self.calls = 0

    def get(self, key: str) -> Any:
        self.calls += 1
        raise self.exc

    def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        self.calls += 1
        raise self.exc
