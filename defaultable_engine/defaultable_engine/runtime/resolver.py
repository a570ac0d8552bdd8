from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from defaultable_engine.errors import UnsupportedFieldError
from defaultable_engine.models.context import RequestContext
from defaultable_engine.models.field import FieldLike
from defaultable_engine.models.meta import META_DEFAULT_LAST
from defaultable_engine.models.value import LiteralValue, as_value
from defaultable_engine.normalize.registry import HandlerRegistry

from .config import DefaultableConfig
from .keys import CacheKeyDeriver
from .store import LastValueStore

logger = logging.getLogger(__name__)

PostCallback = Callable[[Any, RequestContext], Any]


class DefaultResolver:
    """
    Applies defaults to fields on create-like requests.

    apply_default:    explicit value or producer -> normalized field metadata
    apply_last_value: value this principal last submitted -> apply_default

    Fields on update requests come back untouched (apply_last_value still
    marks them so the submit-time recorder picks them up).
    """

    def __init__(
        self,
        store: LastValueStore,
        *,
        registry: Optional[HandlerRegistry] = None,
        keys: Optional[CacheKeyDeriver] = None,
        config: Optional[DefaultableConfig] = None,
    ) -> None:
        self.config = config or DefaultableConfig()
        self.store = store
        self.registry = registry or HandlerRegistry.with_defaults()
        self.keys = keys or CacheKeyDeriver(self.config)

    def _require_supported(self, field: FieldLike) -> None:
        if self.config.is_unsupported(field.type_identity):
            raise UnsupportedFieldError(field.type_identity, getattr(field, "attribute", None))

    def cache_key(self, field: FieldLike, *, ctx: RequestContext, action: Optional[str] = None) -> str:
        return self.keys.derive(ctx, field, action)

    def apply_default(
        self,
        field: FieldLike,
        value: Any,
        *,
        ctx: RequestContext,
        callback: Optional[PostCallback] = None,
    ) -> FieldLike:
        self._require_supported(field)

        if not ctx.create_like:
            return field

        resolved = as_value(value).resolve(ctx)
        if callback is not None:
            resolved = callback(resolved, ctx)

        normalized = self.registry.normalize(field, resolved)
        return field.with_meta(normalized)

    def apply_last_value(
        self,
        field: FieldLike,
        *,
        ctx: RequestContext,
        callback: Optional[PostCallback] = None,
        action: Optional[str] = None,
    ) -> FieldLike:
        self._require_supported(field)

        if ctx.create_like:
            key = self.cache_key(field, ctx=ctx, action=action)
            last = self.store.get(key)
            if last is not None:
                # Cached values are data, never producers.
                field = self.apply_default(field, LiteralValue(last), ctx=ctx, callback=callback)
            else:
                logger.debug("no last value for %s.%s", ctx.resource, field.attribute)

        return field.with_meta({META_DEFAULT_LAST: True})
