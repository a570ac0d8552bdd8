"""
Value normalization: per-field-type handlers and the registry that picks them.
"""
from .handlers import (
    BUILTIN_HANDLERS,
    Handler,
    NormalizedValue,
    handle_belongs_to,
    handle_generic,
    handle_morph_to,
)
from .registry import HandlerRegistry

__all__ = [
    "BUILTIN_HANDLERS",
    "Handler",
    "NormalizedValue",
    "handle_belongs_to",
    "handle_generic",
    "handle_morph_to",
    "HandlerRegistry",
]
