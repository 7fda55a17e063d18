"""Compose option sets into modification lists.

A modification list holds the primary step's tokens as flat strings,
followed by one nested list per chained step:

    [
        "c_scale,w_500,h_500",
        "ar_16:9",
        ["br_12", "e_grayscale"],
        ["bo_1px_dashed_#fff", "e_pixelate"],
    ]

The flat/nested distinction is what the renderer uses to decide where one
step ends and the next begins.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from .formatters import border, resize
from .registry import FIELD_TABLE
from .value_objects import OptionSet, ResizeSpec, coerce_options

logger = logging.getLogger(__name__)

Options = Union[OptionSet, Mapping[str, Any], None]
Modification = Union[str, list[str]]


def get_border(options: Options) -> Optional[str]:
    """Return the ``bo_`` token for the options' border, if any."""
    return border(coerce_options(options).border)


def get_resize(options: Options) -> str:
    """Return the composite resize token for the options.

    A nested ``resize`` spec wins outright; flat width/height/crop fields
    are only consulted when it is absent.

    Returns:
        The token, or an empty string if no size or crop was requested
    """
    options = coerce_options(options)
    if options.resize is not None:
        return resize(options.resize)
    return resize(
        ResizeSpec(type=options.crop, width=options.width, height=options.height)
    )


def get_modifications(options: Options) -> list[str]:
    """Map every recognised field present in ``options`` to its token.

    Tokens follow field table order regardless of the order the caller
    supplied them in. Resize fields and chaining are not part of the table.
    """
    options = coerce_options(options)
    tokens = []
    for spec in FIELD_TABLE:
        token = spec.token(getattr(options, spec.attribute))
        if token is not None:
            tokens.append(token)
    return tokens


def modify(options: Options) -> list[Modification]:
    """Build the modification list for an option set.

    Args:
        options: OptionSet or loose mapping of options

    Returns:
        Flat primary step tokens followed by one list per chained step
    """
    options = coerce_options(options)
    modifications: list[Modification] = []

    resize_token = get_resize(options)
    if resize_token:
        modifications.append(resize_token)
    modifications.extend(get_modifications(options))

    for index, step in enumerate(options.chaining):
        if any(
            value is not None
            for value in (step.resize, step.width, step.height, step.crop)
        ):
            logger.debug("Ignoring resize fields in chained step %d", index)
        group = get_modifications(step)
        if not group:
            logger.debug("Skipping empty chained step %d", index)
            continue
        modifications.append(group)

    return modifications


__all__ = [
    "Modification",
    "Options",
    "get_border",
    "get_resize",
    "get_modifications",
    "modify",
]
