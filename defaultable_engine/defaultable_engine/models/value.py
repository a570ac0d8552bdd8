from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from .context import RequestContext


@dataclass(frozen=True)
class LiteralValue:
    """A default given as-is."""

    value: Any

    def resolve(self, ctx: RequestContext) -> Any:
        return self.value


@dataclass(frozen=True)
class Producer:
    """
    A default computed per request.

    fn receives the RequestContext. Whatever it raises propagates to the caller.
    """

    fn: Callable[[RequestContext], Any]

    def resolve(self, ctx: RequestContext) -> Any:
        return self.fn(ctx)


Value = Union[LiteralValue, Producer]


def as_value(raw: Any) -> Value:
    """Wrap a plain value or a callable into a Value; Values pass through."""
    if isinstance(raw, (LiteralValue, Producer)):
        return raw
    # Classes are callable too, but a class is a type reference, not a producer.
    if callable(raw) and not isinstance(raw, type):
        return Producer(raw)
    return LiteralValue(raw)
