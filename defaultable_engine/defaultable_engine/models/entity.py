from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class EntityRef(Protocol):
    """
    Reference to a record owned by the host (a model or resource instance).

    Only two things are ever read from it:
      - key(): primary identifier
      - type_key(): stable kind discriminator (e.g. "articles")
    """

    def key(self) -> Any:
        ...

    def type_key(self) -> str:
        ...


@dataclass(frozen=True)
class Entity:
    """Plain EntityRef for hosts (and tests) without their own model layer."""

    kind: str
    id: Any

    def key(self) -> Any:
        return self.id

    def type_key(self) -> str:
        return self.kind


def is_entity(value: Any) -> bool:
    """
    True for EntityRef instances.

    Classes are excluded: a model class carries key()/type_key() as instance
    methods and would pass the structural check.
    """
    return not isinstance(value, type) and isinstance(value, EntityRef)


def _class_type_key(cls: type) -> Optional[str]:
    for name in ("uri_key", "type_key"):
        attr = getattr(cls, name, None)
        # Only methods bound to the class itself (classmethods) are callable here
        if inspect.ismethod(attr) and attr.__self__ is cls:
            return attr()
    return None


def type_key_of(ref: Any) -> Optional[str]:
    """
    Resolve a type reference to a stable type key.

    Accepts a plain string, an EntityRef, a resource/model class exposing a
    `uri_key` or `type_key` classmethod, or an object with a callable
    `uri_key`. Anything else has no stable key and yields None.
    """
    if ref is None:
        return None
    if isinstance(ref, str):
        return ref or None
    if isinstance(ref, type):
        return _class_type_key(ref)
    if is_entity(ref):
        return ref.type_key()
    uri_key = getattr(ref, "uri_key", None)
    if callable(uri_key):
        return uri_key()
    return None
