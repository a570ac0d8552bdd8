from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Protocol, runtime_checkable


# Categories with no user-editable value: list relations, read-only ids,
# and file-like uploads. Default for DefaultableConfig.unsupported_types.
UNSUPPORTED_TYPES: frozenset[str] = frozenset(
    {
        "has_many",
        "belongs_to_many",
        "morph_many",
        "morph_to_many",
        "file",
        "image",
        "avatar",
        "id",
    }
)


@runtime_checkable
class FieldLike(Protocol):
    """
    What the core needs from a host field.

    - attribute: the model attribute / form input name
    - type_identity: stable category tag (e.g. "text", "belongs_to")
    - meta: metadata mapping read by the host renderer
    - with_meta(patch): returns a field carrying the merged metadata
    """

    attribute: str
    type_identity: str
    meta: Mapping[str, Any]

    def with_meta(self, patch: Mapping[str, Any]) -> "FieldLike":
        ...


@dataclass(frozen=True)
class Field:
    """
    Immutable field descriptor.

    with_meta() never mutates: it returns a copy with the patch merged over
    the existing metadata.

    Instances compare by value but are unhashable (meta is a dict).
    """

    attribute: str
    meta: Mapping[str, Any] = field(default_factory=dict)
    type_identity: str = "text"

    def __post_init__(self) -> None:
        if not isinstance(self.attribute, str) or not self.attribute.strip():
            raise ValueError("Field.attribute must be a non-empty string")
        object.__setattr__(self, "meta", dict(self.meta) if self.meta else {})

    def with_meta(self, patch: Mapping[str, Any]) -> "Field":
        merged = dict(self.meta)
        merged.update(patch)
        return replace(self, meta=merged)


@dataclass(frozen=True)
class BelongsTo(Field):
    """Direct reference: points at exactly one entity kind."""

    type_identity: str = "belongs_to"


@dataclass(frozen=True)
class MorphTo(Field):
    """Polymorphic reference: needs both an id and a type discriminator."""

    type_identity: str = "morph_to"


@dataclass(frozen=True)
class HasMany(Field):
    type_identity: str = "has_many"


@dataclass(frozen=True)
class BelongsToMany(Field):
    type_identity: str = "belongs_to_many"


@dataclass(frozen=True)
class MorphMany(Field):
    type_identity: str = "morph_many"


@dataclass(frozen=True)
class File(Field):
    type_identity: str = "file"


@dataclass(frozen=True)
class Id(Field):
    type_identity: str = "id"
