from __future__ import annotations

from typing import Any


class DefaultableError(Exception):
    """Base class for all errors raised by defaultable_engine."""


class ConfigurationError(DefaultableError, ValueError):
    """
    Raised at configuration or call time when the host wired something up wrong.

    These are never swallowed: they point at a mistake in field declarations,
    handler registrations, or loaded settings.
    """


class UnsupportedFieldError(ConfigurationError):
    """Defaulting was requested on a field category that has no editable value."""

    def __init__(self, type_identity: str, attribute: str | None = None) -> None:
        self.type_identity = type_identity
        self.attribute = attribute
        where = f" (attribute {attribute!r})" if attribute else ""
        super().__init__(f"Field type [{type_identity}]{where} does not support default values")


class InvalidHandlerError(ConfigurationError):
    """A registered normalization handler is neither callable nor a known handler name."""

    def __init__(self, key: Any, handler: Any) -> None:
        self.key = key
        self.handler = handler
        name = getattr(key, "__qualname__", None) or str(key)
        super().__init__(f"Invalid default field behaviour handler for [{name}]: {handler!r}")
