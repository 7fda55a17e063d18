"""Border token formatting."""

from typing import Any, Mapping, Optional, Union

from ..value_objects import BorderSpec

BORDER_PREFIX = "bo"


def border_value(value: Union[BorderSpec, Mapping[str, Any], str, None]) -> Optional[str]:
    """Render the part of a border token that follows ``bo_``.

    Strings are treated as pre-formatted and copied verbatim. Structured
    borders render as ``<width>px_<type>_<color>`` with type and colour
    defaulting to solid black.
    """
    spec = BorderSpec.coerce(value)
    if spec is None:
        return None
    if isinstance(spec, str):
        return spec
    return f"{spec.width}px_{spec.type}_{spec.color}"


def border(value: Union[BorderSpec, Mapping[str, Any], str, None]) -> Optional[str]:
    """Build a ``bo_`` token from a border spec or raw string.

    Examples:
        border({"width": 10})  # "bo_10px_solid_black"
        border("10px_dotted_black")  # "bo_10px_dotted_black"
    """
    rendered = border_value(value)
    if rendered is None:
        return None
    return f"{BORDER_PREFIX}_{rendered}"
