"""Value objects describing a requested media transformation.

Callers usually hand over a loose option bag (a plain dict, often decoded from
JSON with camelCase keys). These frozen dataclasses give every recognised
option an explicit, optional slot so that "field absent" and "token omitted"
mean the same thing throughout the package.

Use ``OptionSet.from_mapping()`` (or ``coerce_options()``) to build one from
an untyped mapping. Unknown keys are ignored.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

# Plain scalar values rendered verbatim into a token
Scalar = Union[int, float, str]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_attribute_name(key: str) -> str:
    """Convert a wire key (``bitRate``) to its attribute name (``bit_rate``).

    Keys that are already snake_case are returned unchanged.
    """
    return _CAMEL_BOUNDARY.sub("_", key).lower()


@dataclass(frozen=True)
class BorderSpec:
    """Structured border description.

    Attributes:
        width: Border width in pixels (required)
        type: Line style, e.g. "dotted"
        color: Colour name or hex code
    """

    width: Scalar
    type: str = "solid"
    color: str = "black"

    @classmethod
    def coerce(cls, value: Any) -> Union["BorderSpec", str, None]:
        """Normalise a border value from an option bag.

        Strings are pre-formatted borders and pass through untouched.
        Mappings without a width cannot describe a border and yield None.
        """
        if value is None or isinstance(value, (BorderSpec, str)):
            return value
        if isinstance(value, Mapping):
            if value.get("width") is None:
                logger.debug("Dropping border without width: %r", value)
                return None
            return cls(
                width=value["width"],
                type=value.get("type") or "solid",
                color=value.get("color") or "black",
            )
        logger.debug("Dropping unsupported border value: %r", value)
        return None


@dataclass(frozen=True)
class ResizeSpec:
    """Nested resize description.

    When present on an OptionSet it replaces the flat width/height/crop fields.

    Attributes:
        type: Crop mode, e.g. "scale" or "fill"
        width: Target width, numeric or string
        height: Target height, numeric or string
    """

    type: Optional[str] = None
    width: Optional[Scalar] = None
    height: Optional[Scalar] = None

    @classmethod
    def coerce(cls, value: Any) -> Optional["ResizeSpec"]:
        """Normalise a resize value from an option bag."""
        if value is None or isinstance(value, ResizeSpec):
            return value
        if isinstance(value, Mapping):
            return cls(
                type=value.get("type"),
                width=value.get("width"),
                height=value.get("height"),
            )
        logger.debug("Dropping unsupported resize value: %r", value)
        return None


@dataclass(frozen=True)
class OptionSet:
    """One transformation step plus any chained steps that follow it.

    Every attribute is optional; ``None`` means the option was not requested.
    The generic options mirror the field table in ``modifiers.registry``.
    """

    # Size and crop
    width: Optional[Scalar] = None
    height: Optional[Scalar] = None
    crop: Optional[str] = None
    resize: Optional[ResizeSpec] = None

    # Generic options
    angle: Optional[Scalar] = None
    aspect_ratio: Optional[Scalar] = None
    audio_codec: Optional[str] = None
    audio_frequency: Optional[Scalar] = None
    background: Optional[str] = None
    bit_rate: Optional[Scalar] = None
    border: Union[BorderSpec, str, None] = None
    color: Optional[str] = None
    color_space: Optional[str] = None
    custom_function: Optional[str] = None
    default_image: Optional[str] = None
    delay: Optional[Scalar] = None
    density: Optional[Scalar] = None
    dpr: Optional[Scalar] = None
    duration: Optional[Scalar] = None
    effect: Optional[str] = None
    end_offset: Optional[Scalar] = None
    fetch_format: Optional[str] = None
    flags: Union[str, tuple[str, ...], None] = None
    fps: Optional[Scalar] = None
    gravity: Optional[str] = None
    keyframe_interval: Optional[Scalar] = None
    opacity: Optional[Scalar] = None
    overlay: Optional[str] = None
    page: Optional[Scalar] = None
    quality: Optional[Scalar] = None
    radius: Optional[Scalar] = None
    start_offset: Optional[Scalar] = None
    streaming_profile: Optional[str] = None
    underlay: Optional[str] = None
    video_codec: Optional[str] = None
    x: Optional[Scalar] = None
    y: Optional[Scalar] = None
    zoom: Optional[Scalar] = None

    # Subsequent steps, applied in order
    chaining: tuple["OptionSet", ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OptionSet":
        """Build an OptionSet from a loose option bag.

        Accepts camelCase wire keys (``aspectRatio``) as well as attribute
        names (``aspect_ratio``). Unknown keys and malformed nested values
        are dropped without raising.

        Args:
            data: Caller supplied options, e.g. decoded JSON

        Returns:
            OptionSet with every recognised option populated
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}

        for key, value in data.items():
            name = to_attribute_name(str(key))
            if name not in known:
                logger.debug("Ignoring unknown option: %s", key)
                continue
            values[name] = value

        if "border" in values:
            values["border"] = BorderSpec.coerce(values["border"])
        if "resize" in values:
            values["resize"] = ResizeSpec.coerce(values["resize"])
        if isinstance(values.get("flags"), list):
            values["flags"] = tuple(values["flags"])
        if "chaining" in values:
            values["chaining"] = _coerce_chaining(values["chaining"])

        return cls(**values)


def _coerce_chaining(value: Any) -> tuple[OptionSet, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        logger.debug("Dropping chaining that is not a sequence: %r", value)
        return ()

    steps = []
    for step in value:
        if isinstance(step, OptionSet):
            steps.append(step)
        elif isinstance(step, Mapping):
            steps.append(OptionSet.from_mapping(step))
        else:
            logger.debug("Dropping chained step that is not a mapping: %r", step)
    return tuple(steps)


def coerce_options(options: Union[OptionSet, Mapping[str, Any], None]) -> OptionSet:
    """Return ``options`` as an OptionSet, converting mappings as needed."""
    if isinstance(options, OptionSet):
        return options
    if isinstance(options, Mapping):
        return OptionSet.from_mapping(options)
    if options is not None:
        logger.debug("Treating unsupported options value as empty: %r", options)
    return OptionSet()


__all__ = [
    "BorderSpec",
    "ResizeSpec",
    "OptionSet",
    "Scalar",
    "coerce_options",
    "to_attribute_name",
]
