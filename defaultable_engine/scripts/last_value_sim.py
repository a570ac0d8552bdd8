# defaultable_engine/scripts/last_value_sim.py
from __future__ import annotations

import logging

from defaultable_engine import BelongsTo, DefaultableConfig, Entity, Field, MorphTo, RequestContext, build
from defaultable_engine.runtime.in_memory_store import InMemoryCache


def _show(label: str, fields: list) -> None:
    print(f"--- {label} ---")
    for f in fields:
        print(f"  {f.attribute:<14} {dict(f.meta)}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = DefaultableConfig.from_env()
    resolver, recorder = build(InMemoryCache(), config=config)

    ctx = RequestContext.create("posts", principal_id="U1")

    # --- First create form: explicit defaults + nothing remembered yet ---
    form = [
        resolver.apply_default(Field("status"), "draft", ctx=ctx),
        resolver.apply_default(Field("slug"), lambda c: f"{c.resource}-new", ctx=ctx),
        resolver.apply_last_value(BelongsTo("category_id"), ctx=ctx),
        resolver.apply_last_value(MorphTo("subject"), ctx=ctx),
    ]
    _show("first create form", form)

    # --- Submit ---
    recorder.after_fill(
        form,
        {"status": "draft", "category_id": 5, "subject": 7, "subject_type": "articles"},
        ctx=ctx,
    )

    # --- Second create form: remembered values come back ---
    again = [
        resolver.apply_last_value(BelongsTo("category_id"), ctx=ctx),
        resolver.apply_last_value(MorphTo("subject"), ctx=ctx),
        resolver.apply_default(BelongsTo("author_id"), Entity("users", 1), ctx=ctx),
    ]
    _show("second create form", again)

    # --- Update form: untouched ---
    edit = RequestContext.update("posts", principal_id="U1")
    _show("update form", [resolver.apply_last_value(BelongsTo("category_id"), ctx=edit)])


if __name__ == "__main__":
    main()
