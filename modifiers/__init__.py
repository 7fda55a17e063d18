"""Modifier path builder for media delivery URLs.

This package turns a structured description of an image transformation
into the compact modifier segment of a delivery URL:

    from modifiers import build_modifiers

    build_modifiers({
        "width": 500,
        "height": 500,
        "crop": "scale",
        "aspectRatio": "16:9",
        "chaining": [{"effect": "grayscale"}],
    })
    # "c_scale,w_500,h_500,ar_16:9/e_grayscale"

Public API
----------
- ``modify(options)``: build the modification list (flat tokens for the
  primary step, nested lists for chained steps)
- ``to_modification_string(modifications)``: render a modification list
- ``build_modifiers(options)``: both of the above
- ``get_resize`` / ``get_border`` / ``get_modifications``: individual parts
- ``resize`` / ``border``: format a resize or border spec directly

Options may be passed as an ``OptionSet`` or as a plain mapping using
camelCase keys. Unknown keys are ignored and nothing here raises for
missing or malformed fields; the corresponding token is simply omitted.
"""

from .compose import get_border, get_modifications, get_resize, modify
from .formatters import border, resize
from .registry import FIELD_TABLE, get_available_fields, get_field, has_field
from .render import build_modifiers, to_modification_string
from .value_objects import BorderSpec, OptionSet, ResizeSpec, coerce_options

__all__ = [
    # Main API
    "modify",
    "to_modification_string",
    "build_modifiers",
    # Parts
    "get_resize",
    "get_border",
    "get_modifications",
    "resize",
    "border",
    # Field table
    "FIELD_TABLE",
    "get_field",
    "has_field",
    "get_available_fields",
    # Value objects
    "OptionSet",
    "BorderSpec",
    "ResizeSpec",
    "coerce_options",
]
