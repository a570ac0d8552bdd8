from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from defaultable_engine.models.entity import is_entity, type_key_of
from defaultable_engine.models.field import FieldLike
from defaultable_engine.models.meta import (
    META_BELONGS_TO_ID,
    META_MORPH_TO_ID,
    META_MORPH_TO_TYPE,
    META_VALUE,
)

NormalizedValue = Dict[str, Any]
Handler = Callable[[FieldLike, Any], Mapping[str, Any]]


def _id_of(value: Any) -> Any:
    if is_entity(value):
        return value.key()
    # A class is a type reference, never an identifier
    if isinstance(value, type):
        return None
    return value


def _split_pair(value: Any) -> Tuple[Any, Optional[str]]:
    """
    Best-effort decoding of a polymorphic value into (id, type_key).

    Lists count as pairs: JSON-backed caches hand tuples back as lists.
    """
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            return None, None
        entity_or_id, type_ref = value
        type_key = type_key_of(type_ref)
        if type_key is None and is_entity(entity_or_id):
            type_key = entity_or_id.type_key()
        return _id_of(entity_or_id), type_key

    if is_entity(value):
        return value.key(), value.type_key()

    return None, None


def handle_generic(field: FieldLike, value: Any) -> NormalizedValue:
    return {META_VALUE: value}


def handle_morph_to(field: FieldLike, value: Any) -> NormalizedValue:
    """
    Polymorphic reference.

    (entity_or_id, type_ref) -> id + resolved type key
    bare entity             -> its key + type key
    None / anything else    -> both None
    """
    ref_id, ref_type = _split_pair(value)
    return {
        META_MORPH_TO_TYPE: ref_type,
        META_MORPH_TO_ID: ref_id,
    }


def handle_belongs_to(field: FieldLike, value: Any) -> NormalizedValue:
    return {META_BELONGS_TO_ID: _id_of(value)}


# Handlers addressable by name in registrations.
BUILTIN_HANDLERS: Mapping[str, Handler] = {
    "handle_generic": handle_generic,
    "handle_morph_to": handle_morph_to,
    "handle_belongs_to": handle_belongs_to,
}
