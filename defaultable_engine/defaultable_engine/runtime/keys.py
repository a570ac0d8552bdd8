from __future__ import annotations

import hashlib
from typing import Optional

from defaultable_engine.models.context import RequestContext
from defaultable_engine.models.field import FieldLike

from .config import DefaultableConfig

SEPARATOR = "::"


class CacheKeyDeriver:
    """
    Builds the cache key for a (principal, resource, action, field) tuple.

    Key shape: "<prefix>.<principal>.<sha256 of composite>"

    The composite is hashed so keys stay bounded and free of characters a
    cache backend might reject. An anonymous principal renders as "".
    """

    def __init__(self, config: Optional[DefaultableConfig] = None) -> None:
        self.config = config or DefaultableConfig()

    def composite(self, ctx: RequestContext, field: FieldLike, action: Optional[str] = None) -> str:
        action = action if action is not None else ctx.action
        parts = [ctx.resource]
        if action:
            parts.append(action)
        parts.append(field.type_identity)
        parts.append(field.attribute)
        return SEPARATOR.join(parts)

    def derive(self, ctx: RequestContext, field: FieldLike, action: Optional[str] = None) -> str:
        digest = hashlib.sha256(self.composite(ctx, field, action).encode("utf-8")).hexdigest()
        principal = ctx.principal_id if ctx.principal_id is not None else ""
        return f"{self.config.cache_key_prefix}.{principal}.{digest}"
