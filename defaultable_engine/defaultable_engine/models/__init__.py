"""
Core models.

Field descriptors, request context, entity references and the value sum type.
"""

from .meta import (
    META_BELONGS_TO_ID,
    META_DEFAULT_LAST,
    META_MORPH_TO_ID,
    META_MORPH_TO_TYPE,
    META_VALUE,
    MORPH_TYPE_SUFFIX,
)
from .entity import Entity, EntityRef, is_entity, type_key_of
from .field import (
    UNSUPPORTED_TYPES,
    BelongsTo,
    BelongsToMany,
    Field,
    FieldLike,
    File,
    HasMany,
    Id,
    MorphMany,
    MorphTo,
)
from .context import RequestContext
from .value import LiteralValue, Producer, Value, as_value

__all__ = [
    "META_BELONGS_TO_ID",
    "META_DEFAULT_LAST",
    "META_MORPH_TO_ID",
    "META_MORPH_TO_TYPE",
    "META_VALUE",
    "MORPH_TYPE_SUFFIX",
    "Entity",
    "EntityRef",
    "is_entity",
    "type_key_of",
    "UNSUPPORTED_TYPES",
    "BelongsTo",
    "BelongsToMany",
    "Field",
    "FieldLike",
    "File",
    "HasMany",
    "Id",
    "MorphMany",
    "MorphTo",
    "RequestContext",
    "LiteralValue",
    "Producer",
    "Value",
    "as_value",
]
