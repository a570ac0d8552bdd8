from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from defaultable_engine.errors import ConfigurationError
from defaultable_engine.models.field import UNSUPPORTED_TYPES

DEFAULT_CACHE_KEY = "default_last"
DEFAULT_CACHE_TTL = 60 * 60


@dataclass(frozen=True)
class DefaultableConfig:
    """
    Process-level settings. Loaded once at startup; never changed afterwards.

    - cache_key_prefix: namespace for every cache key, made unique per principal
    - ttl_seconds: how long each remembered value lives
    - unsupported_types: field type identities that can never be defaulted
    """

    cache_key_prefix: str = DEFAULT_CACHE_KEY
    ttl_seconds: int = DEFAULT_CACHE_TTL
    unsupported_types: frozenset[str] = field(default_factory=lambda: UNSUPPORTED_TYPES)

    def __post_init__(self) -> None:
        prefix = str(self.cache_key_prefix).strip()
        if not prefix:
            raise ConfigurationError("cache key prefix must be non-empty")
        try:
            ttl = int(self.ttl_seconds)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"cache ttl must be an integer, got {self.ttl_seconds!r}") from exc
        if ttl <= 0:
            raise ConfigurationError(f"cache ttl must be positive, got {ttl}")

        object.__setattr__(self, "cache_key_prefix", prefix)
        object.__setattr__(self, "ttl_seconds", ttl)
        object.__setattr__(self, "unsupported_types", frozenset(self.unsupported_types))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "DefaultableConfig":
        """
        Build from the published settings shape, merged over the defaults:

            {"cache": {"key": "default_last", "ttl": 3600},
             "unsupported_types": ["has_many", ...]}
        """
        data = data or {}
        cache = data.get("cache") or {}
        if not isinstance(cache, Mapping):
            raise ConfigurationError("'cache' settings must be a mapping")

        unsupported: Iterable[str] = data.get("unsupported_types", UNSUPPORTED_TYPES)
        if isinstance(unsupported, str):
            raise ConfigurationError("'unsupported_types' must be a list of type identities")

        return cls(
            cache_key_prefix=cache.get("key", DEFAULT_CACHE_KEY),
            ttl_seconds=cache.get("ttl", DEFAULT_CACHE_TTL),
            unsupported_types=frozenset(unsupported),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DefaultableConfig":
        """Load from DEFAULTABLE_CACHE_KEY / DEFAULTABLE_CACHE_TTL."""
        env = os.environ if environ is None else environ
        return cls(
            cache_key_prefix=env.get("DEFAULTABLE_CACHE_KEY", DEFAULT_CACHE_KEY),
            ttl_seconds=env.get("DEFAULTABLE_CACHE_TTL", str(DEFAULT_CACHE_TTL)),
        )

    def is_unsupported(self, type_identity: str) -> bool:
        return type_identity in self.unsupported_types
