"""
Runtime layer (config, cache keys, stores, resolver and recorder wiring).

Models live in defaultable_engine.models; handlers in defaultable_engine.normalize.
"""
from .config import DefaultableConfig
from .keys import CacheKeyDeriver
from .store import CacheBackend, LastValueStore
from .in_memory_store import InMemoryCache
from .resolver import DefaultResolver
from .recorder import LastValueRecorder, is_defaultable_last

__all__ = [
    "DefaultableConfig",
    "CacheKeyDeriver",
    "CacheBackend",
    "LastValueStore",
    "InMemoryCache",
    "DefaultResolver",
    "LastValueRecorder",
    "is_defaultable_last",
]
