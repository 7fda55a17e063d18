"""Render modification lists to the URL path segment."""

from collections.abc import Iterable, Sequence
from typing import Union

from .compose import Options, modify


def to_modification_string(modifications: Iterable[Union[str, Sequence[str]]]) -> str:
    """Flatten a modification list into ``a,b/c,d`` form.

    Consecutive flat tokens share a group; every nested sequence starts a
    group of its own. Tokens are joined with ``,`` and groups with ``/``.
    Empty tokens and empty groups are skipped.
    """
    groups: list[list[str]] = []
    current: list[str] = []

    for item in modifications:
        if isinstance(item, str):
            if item:
                current.append(item)
            continue
        if current:
            groups.append(current)
            current = []
        groups.append([token for token in item if token])

    if current:
        groups.append(current)

    return "/".join(",".join(group) for group in groups if group)


def build_modifiers(options: Options) -> str:
    """Compose and render ``options`` in one call."""
    return to_modification_string(modify(options))


__all__ = ["to_modification_string", "build_modifiers"]
