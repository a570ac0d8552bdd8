"""
defaultable_engine

Create-form defaults for admin-panel fields: explicit defaults, and the value
the same user last submitted, remembered in a per-user cache.
"""
from __future__ import annotations

from .errors import (
    ConfigurationError,
    DefaultableError,
    InvalidHandlerError,
    UnsupportedFieldError,
)
from .models import BelongsTo, Entity, Field, MorphTo, RequestContext
from .normalize import HandlerRegistry
from .runtime import (
    CacheKeyDeriver,
    DefaultableConfig,
    DefaultResolver,
    InMemoryCache,
    LastValueRecorder,
    LastValueStore,
)


def build(
    backend=None,
    *,
    config: DefaultableConfig | None = None,
    registry: HandlerRegistry | None = None,
) -> tuple[DefaultResolver, LastValueRecorder]:
    """Wire a resolver and recorder sharing one store, key deriver and config."""
    config = config or DefaultableConfig()
    store = LastValueStore(backend if backend is not None else InMemoryCache(), config.ttl_seconds)
    keys = CacheKeyDeriver(config)
    resolver = DefaultResolver(store, registry=registry, keys=keys, config=config)
    recorder = LastValueRecorder(store, keys=keys, config=config)
    return resolver, recorder


__all__ = [
    "ConfigurationError",
    "DefaultableError",
    "InvalidHandlerError",
    "UnsupportedFieldError",
    "BelongsTo",
    "Entity",
    "Field",
    "MorphTo",
    "RequestContext",
    "HandlerRegistry",
    "CacheKeyDeriver",
    "DefaultableConfig",
    "DefaultResolver",
    "InMemoryCache",
    "LastValueRecorder",
    "LastValueStore",
    "build",
]
