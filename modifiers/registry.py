"""Field table mapping option keys to modifier token prefixes.

The table is declared once, in order, and never mutated. Token order inside
a step follows declaration order, so generated paths stay byte-identical
across calls and releases. New fields must be inserted at their alphabetical
position by wire key; reordering existing rows changes every URL built with
them.
"""

from typing import Optional

from .base import FieldSpec
from .formatters import border_value, flags_value

FIELD_TABLE: tuple[FieldSpec, ...] = (
    FieldSpec("angle", "a"),
    FieldSpec("aspectRatio", "ar"),
    FieldSpec("audioCodec", "ac"),
    FieldSpec("audioFrequency", "af"),
    FieldSpec("background", "b"),
    FieldSpec("bitRate", "br"),
    FieldSpec("border", "bo", border_value),
    FieldSpec("color", "co"),
    FieldSpec("colorSpace", "cs"),
    FieldSpec("customFunction", "fn"),
    FieldSpec("defaultImage", "d"),
    FieldSpec("delay", "dl"),
    FieldSpec("density", "dn"),
    FieldSpec("dpr", "dpr"),
    FieldSpec("duration", "du"),
    FieldSpec("effect", "e"),
    FieldSpec("endOffset", "eo"),
    FieldSpec("fetchFormat", "f"),
    FieldSpec("flags", "fl", flags_value),
    FieldSpec("fps", "fps"),
    FieldSpec("gravity", "g"),
    FieldSpec("keyframeInterval", "ki"),
    FieldSpec("opacity", "o"),
    FieldSpec("overlay", "l"),
    FieldSpec("page", "pg"),
    FieldSpec("quality", "q"),
    FieldSpec("radius", "r"),
    FieldSpec("startOffset", "so"),
    FieldSpec("streamingProfile", "sp"),
    FieldSpec("underlay", "u"),
    FieldSpec("videoCodec", "vc"),
    FieldSpec("x", "x"),
    FieldSpec("y", "y"),
    FieldSpec("zoom", "z"),
)

_BY_KEY: dict[str, FieldSpec] = {spec.key: spec for spec in FIELD_TABLE}


def get_field(key: str) -> Optional[FieldSpec]:
    """Look up a field by wire key or attribute name.

    Args:
        key: Wire key ("bitRate") or attribute name ("bit_rate")

    Returns:
        The FieldSpec, or None if the key is not recognised
    """
    spec = _BY_KEY.get(key)
    if spec is not None:
        return spec
    for candidate in FIELD_TABLE:
        if candidate.attribute == key:
            return candidate
    return None


def has_field(key: str) -> bool:
    """Check whether ``key`` is a recognised field."""
    return get_field(key) is not None


def get_available_fields() -> list[FieldSpec]:
    """Return all fields in table order."""
    return list(FIELD_TABLE)


__all__ = [
    "FIELD_TABLE",
    "get_field",
    "has_field",
    "get_available_fields",
]
