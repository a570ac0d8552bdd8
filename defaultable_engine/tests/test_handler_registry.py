from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import pytest

from defaultable_engine.errors import ConfigurationError, InvalidHandlerError
from defaultable_engine.models.field import BelongsTo, Field, MorphTo
from defaultable_engine.normalize.handlers import handle_belongs_to, handle_morph_to
from defaultable_engine.normalize.registry import HandlerRegistry


@dataclass(frozen=True)
class Rating(Field):
    type_identity: str = "rating"


@dataclass(frozen=True)
class StarRating(Rating):
    pass


def _stars(field: Any, value: Any) -> dict:
    return {"value": max(0, min(5, int(value)))}


def test_defaults_cover_morph_to_and_belongs_to() -> None:
    reg = HandlerRegistry.with_defaults()
    assert reg.keys() == (MorphTo, BelongsTo)
    assert reg.resolve(MorphTo("commentable")) is handle_morph_to
    assert reg.resolve(BelongsTo("author_id")) is handle_belongs_to
    assert reg.resolve(Field("title")) is None


def test_normalize_falls_back_to_generic() -> None:
    reg = HandlerRegistry.with_defaults()
    assert reg.normalize(Field("title"), "x") == {"value": "x"}
    assert reg.normalize(BelongsTo("author_id"), 3) == {"belongsToId": 3}


def test_register_by_type_identity_string() -> None:
    reg = HandlerRegistry()
    reg.register("rating", _stars)
    assert reg.normalize(Rating("score"), 9) == {"value": 5}


def test_base_class_registration_matches_subclass() -> None:
    reg = HandlerRegistry()
    reg.register(Rating, _stars)
    assert reg.resolve(StarRating("score")) is _stars


def test_register_list_and_field_instance() -> None:
    reg = HandlerRegistry()
    reg.register([Rating("score"), "slider"], _stars)
    assert reg.keys() == (Rating, "slider")
    assert reg.resolve(Field("volume", type_identity="slider")) is _stars


def test_first_registration_wins() -> None:
    reg = HandlerRegistry()
    first = lambda f, v: {"value": "first"}  # noqa: E731
    second = lambda f, v: {"value": "second"}  # noqa: E731
    reg.register(Rating, first)
    reg.register(StarRating, second)

    assert reg.normalize(StarRating("score"), 1) == {"value": "first"}


def test_later_registration_for_same_key_overwrites_in_place() -> None:
    reg = HandlerRegistry()
    reg.register(Rating, "handle_generic")
    reg.register("slider", _stars)
    reg.register(Rating, _stars)

    assert reg.keys() == (Rating, "slider")
    assert reg.resolve(Rating("score")) is _stars


def test_named_macro_handler() -> None:
    reg = HandlerRegistry()
    reg.macro("stars", _stars)
    reg.register(Rating, "stars")

    assert reg.has_macro("stars")
    assert reg.normalize(Rating("score"), "3") == {"value": 3}


def test_unknown_handler_name_fails_at_resolution() -> None:
    reg = HandlerRegistry()
    reg.register(Rating, "no_such_handler")

    with pytest.raises(InvalidHandlerError) as exc:
        reg.resolve(Rating("score"))
    assert "Rating" in str(exc.value)
    assert isinstance(exc.value, ConfigurationError)


def test_non_callable_handler_fails_at_resolution() -> None:
    reg = HandlerRegistry()
    reg.register("rating", 42)  # type: ignore[arg-type]

    with pytest.raises(InvalidHandlerError):
        reg.resolve(Rating("score"))
    # Non-matching fields are unaffected
    assert reg.resolve(Field("title")) is None


def test_empty_key_and_bad_macro_rejected() -> None:
    reg = HandlerRegistry()
    with pytest.raises(ValueError):
        reg.register("  ", _stars)
    with pytest.raises(TypeError):
        reg.macro("stars", "not callable")  # type: ignore[arg-type]


def test_set_of_keys_rejected() -> None:
    reg = HandlerRegistry()
    with pytest.raises(TypeError):
        reg.register({Rating, "slider"}, _stars)
    assert reg.keys() == ()


def test_registration_alongside_resolution_never_tears() -> None:
    reg = HandlerRegistry()
    names = [f"type_{i}" for i in range(200)]
    handlers = {name: (lambda f, v, n=name: {"value": n}) for name in names}
    fields = [Field("x", type_identity=name) for name in names]
    done = threading.Event()
    results: list = []

    def reader() -> None:
        while not done.is_set():
            for f in fields:
                results.append((f.type_identity, reg.resolve(f)))

    t = threading.Thread(target=reader)
    t.start()
    try:
        with ThreadPoolExecutor(max_workers=4) as pool:
            for name in names:
                # Sequential submission order; each future finishes before the next register
                pool.submit(reg.register, name, handlers[name]).result()
    finally:
        done.set()
        t.join()

    assert results
    for type_identity, handler in results:
        assert handler is None or handler is handlers[type_identity]
    assert reg.keys() == tuple(names)
    assert all(reg.resolve(f) is handlers[f.type_identity] for f in fields)
