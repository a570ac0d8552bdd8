from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from defaultable_engine.errors import InvalidHandlerError
from defaultable_engine.models.field import BelongsTo, FieldLike, MorphTo

from .handlers import BUILTIN_HANDLERS, Handler, NormalizedValue, handle_generic

logger = logging.getLogger(__name__)

# A registration key is a type identity string or a class / runtime-checkable
# Protocol matched with isinstance().
RegistryKey = Union[str, type]
HandlerRef = Union[Handler, str]


def _as_key(key: Any) -> RegistryKey:
    if isinstance(key, (str, type)):
        if isinstance(key, str) and not key.strip():
            raise ValueError("handler registry key must be non-empty")
        return key
    # A field instance registers its class
    return type(key)


def _matches(key: RegistryKey, field: FieldLike) -> bool:
    if isinstance(key, str):
        return getattr(field, "type_identity", None) == key
    return isinstance(field, key)


class HandlerRegistry:
    """
    field type -> normalization handler

    Registrations are ordered and resolution is first-match-wins, so a field
    can match a base class or Protocol registered earlier. Re-registering a
    key replaces its handler in place.

    Writes are copy-on-write under a lock; readers work from a snapshot and
    never see a half-applied registration.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._handlers: Mapping[RegistryKey, HandlerRef] = {}
        self._macros: Mapping[str, Handler] = {}

    @classmethod
    def with_defaults(cls) -> "HandlerRegistry":
        registry = cls()
        registry.register(MorphTo, "handle_morph_to")
        registry.register(BelongsTo, "handle_belongs_to")
        return registry

    def register(self, keys: Union[Any, Iterable[Any]], handler: HandlerRef) -> None:
        # Registration order decides first-match resolution, so keys must be ordered
        if isinstance(keys, (set, frozenset)):
            raise TypeError("register() keys must be an ordered list or tuple, not a set")
        if isinstance(keys, (list, tuple)):
            key_list = [_as_key(k) for k in keys]
        else:
            key_list = [_as_key(keys)]

        with self._lock:
            updated: Dict[RegistryKey, HandlerRef] = dict(self._handlers)
            for k in key_list:
                updated[k] = handler
            self._handlers = updated

        logger.debug("registered default handler %r for %r", handler, key_list)

    def macro(self, name: str, fn: Handler) -> None:
        n = str(name).strip()
        if not n:
            raise ValueError("macro name must be non-empty")
        if not callable(fn):
            raise TypeError("macro must be callable")
        with self._lock:
            updated = dict(self._macros)
            updated[n] = fn
            self._macros = updated

    def has_macro(self, name: str) -> bool:
        return name in self._macros

    def keys(self) -> Tuple[RegistryKey, ...]:
        return tuple(self._handlers.keys())

    def resolve(self, field: FieldLike) -> Optional[Handler]:
        """
        Return the handler for the first registration matching the field, or
        None if nothing matches (callers then use the generic handler).

        Raises InvalidHandlerError when the matching registration names
        something that is neither callable nor a known handler/macro.
        """
        handlers = self._handlers
        macros = self._macros

        for key, ref in handlers.items():
            if not _matches(key, field):
                continue
            if isinstance(ref, str):
                if ref in BUILTIN_HANDLERS:
                    return BUILTIN_HANDLERS[ref]
                if ref in macros:
                    return macros[ref]
                raise InvalidHandlerError(key, ref)
            if callable(ref):
                return ref
            raise InvalidHandlerError(key, ref)

        return None

    def normalize(self, field: FieldLike, value: Any) -> NormalizedValue:
        handler = self.resolve(field) or handle_generic
        return dict(handler(field, value))
