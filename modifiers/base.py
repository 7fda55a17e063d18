"""Core building blocks for modifier formatting.

A modifier token is a short ``<prefix>_<value>`` string. Each recognised
option is described by a FieldSpec: the wire key callers use, the token
prefix, and an optional value formatter for options whose value needs more
than ``str()``.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .value_objects import to_attribute_name


class ValueFormatter(Protocol):
    """Protocol for option value formatters.

    A formatter turns the raw option value into the part of the token that
    follows the prefix. Returning None drops the token.
    """

    def __call__(self, value: Any) -> Optional[str]:
        ...


def format_value(value: Any) -> Optional[str]:
    """Default formatter: render the value as given."""
    return str(value)


@dataclass(frozen=True)
class FieldSpec:
    """One row of the field table.

    Attributes:
        key: Wire key used in option bags (e.g. "bitRate")
        prefix: Token prefix (e.g. "br")
        formatter: Value formatter, defaults to rendering the value as given
    """

    key: str
    prefix: str
    formatter: ValueFormatter = format_value

    @property
    def attribute(self) -> str:
        """OptionSet attribute holding this field's value."""
        return to_attribute_name(self.key)

    def token(self, value: Any) -> Optional[str]:
        """Build the token for ``value``, or None when the field is absent."""
        if value is None:
            return None
        formatted = self.formatter(value)
        if formatted is None or formatted == "":
            return None
        return f"{self.prefix}_{formatted}"


__all__ = [
    "FieldSpec",
    "ValueFormatter",
    "format_value",
]
