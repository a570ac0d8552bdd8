from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from defaultable_engine.models.context import RequestContext
from defaultable_engine.models.field import FieldLike, MorphTo
from defaultable_engine.models.meta import META_DEFAULT_LAST, MORPH_TYPE_SUFFIX

from .config import DefaultableConfig
from .keys import CacheKeyDeriver
from .store import LastValueStore

logger = logging.getLogger(__name__)


def is_defaultable_last(field: FieldLike) -> bool:
    return bool((getattr(field, "meta", None) or {}).get(META_DEFAULT_LAST, False))


class LastValueRecorder:
    """
    Submit-time half of default-last.

    The host calls one of the hooks once a submission has succeeded:
      - after_fill():   resource create/attach, after fields were filled
      - after_action(): action submit, keyed by the action identity

    Every field marked by DefaultResolver.apply_last_value() has its submitted
    value written under the same key the resolver reads from.
    """

    def __init__(
        self,
        store: LastValueStore,
        *,
        keys: Optional[CacheKeyDeriver] = None,
        config: Optional[DefaultableConfig] = None,
    ) -> None:
        self.config = config or DefaultableConfig()
        self.store = store
        self.keys = keys or CacheKeyDeriver(self.config)

    @staticmethod
    def raw_value(field: FieldLike, submitted: Mapping[str, Any]) -> Any:
        """
        Raw submitted value for a field.

        Polymorphic fields keep (id, type) together so the pair can be fully
        normalized again on the next create form.
        """
        value = submitted.get(field.attribute)
        if isinstance(field, MorphTo) or field.type_identity == MorphTo.type_identity:
            return (value, submitted.get(f"{field.attribute}{MORPH_TYPE_SUFFIX}"))
        return value

    def record(
        self,
        fields: Iterable[FieldLike],
        submitted: Mapping[str, Any],
        *,
        ctx: RequestContext,
        action: Optional[str] = None,
    ) -> List[str]:
        written: List[str] = []
        for field in fields:
            if not is_defaultable_last(field):
                continue
            key = self.keys.derive(ctx, field, action)
            if self.store.put(key, self.raw_value(field, submitted), self.config.ttl_seconds):
                written.append(key)
        logger.debug("recorded %d last value(s) for %s", len(written), ctx.resource)
        return written

    def after_fill(
        self,
        fields: Iterable[FieldLike],
        submitted: Mapping[str, Any],
        *,
        ctx: RequestContext,
    ) -> List[str]:
        return self.record(fields, submitted, ctx=ctx)

    def after_action(
        self,
        fields: Iterable[FieldLike],
        submitted: Mapping[str, Any],
        *,
        ctx: RequestContext,
        action: str,
    ) -> List[str]:
        return self.record(fields, submitted, ctx=ctx, action=action)
