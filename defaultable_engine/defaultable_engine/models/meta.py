from __future__ import annotations

# Metadata keys written onto fields. The host renderer reads these verbatim,
# so they keep the renderer's camelCase spelling.
META_VALUE = "value"
META_BELONGS_TO_ID = "belongsToId"
META_MORPH_TO_TYPE = "morphToType"
META_MORPH_TO_ID = "morphToId"
META_DEFAULT_LAST = "defaultLast"

# Submitted morph-to input carries its discriminator under "<attribute>_type".
MORPH_TYPE_SUFFIX = "_type"
