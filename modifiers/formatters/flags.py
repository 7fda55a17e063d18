"""Flag list formatting."""

from typing import Any, Optional


def flags_value(value: Any) -> Optional[str]:
    """Join a list of flags with ``.``; a single string passes through."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ".".join(str(flag) for flag in value if flag) or None
    return str(value)
