"""Resize token formatting.

A resize token combines crop mode and dimensions into one comma-joined
token: ``c_<type>,w_<width>,h_<height>``. Any part may be missing, but a
crop mode is never invented when the caller did not ask for one.
"""

from typing import Any, Mapping, Union

from ..value_objects import ResizeSpec


def resize(spec: Union[ResizeSpec, Mapping[str, Any], None]) -> str:
    """Build the composite resize token.

    Args:
        spec: ResizeSpec or mapping with optional type/width/height

    Returns:
        The token, or an empty string when nothing was requested

    Examples:
        resize({"type": "crop", "width": 10, "height": 20})  # "c_crop,w_10,h_20"
        resize({"width": 10, "height": 10})  # "w_10,h_10"
    """
    spec = ResizeSpec.coerce(spec)
    if spec is None:
        return ""

    parts = []
    if spec.type is not None:
        parts.append(f"c_{spec.type}")
    if spec.width is not None:
        parts.append(f"w_{spec.width}")
    if spec.height is not None:
        parts.append(f"h_{spec.height}")
    return ",".join(parts)
