"""Loading option bags for CLI commands."""

import json
import re
import sys
from pathlib import Path
from typing import Any, Optional

import yaml


class ModifierCLIError(Exception):
    """Base exception for CLI errors."""

    pass


class OptionsLoadError(ModifierCLIError):
    """Raised when options cannot be read or decoded."""

    pass


YAML_SUFFIXES = {".yaml", ".yml"}

INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"


class OptionsLoader(yaml.SafeLoader):
    """SafeLoader that only reads plain decimal numbers as numbers.

    YAML 1.1 treats ``16:9`` as a base-60 integer and ``0x10`` as hex. Option
    values are rendered as written, so those forms stay strings.
    """


OptionsLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (INT_TAG, FLOAT_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
OptionsLoader.add_implicit_resolver(
    INT_TAG, re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$"), list("-+0123456789")
)
OptionsLoader.add_implicit_resolver(
    FLOAT_TAG,
    re.compile(r"^[-+]?[0-9]+\.[0-9]*(?:[eE][-+]?[0-9]+)?$"),
    list("-+0123456789"),
)


def load_yaml(text: Any) -> Any:
    """Parse a YAML document or stream with OptionsLoader."""
    return yaml.load(text, Loader=OptionsLoader)


def _decode(text: str, as_yaml: bool, source: str) -> dict[str, Any]:
    try:
        data = load_yaml(text) if as_yaml else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise OptionsLoadError(f"Could not parse options from {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OptionsLoadError(
            f"Options from {source} must be a mapping, got {type(data).__name__}"
        )
    return data


def load_options(file: Optional[str] = None, inline: Optional[str] = None) -> dict[str, Any]:
    """Get options from --options, a file argument, or stdin.

    Args:
        file: Path to a JSON or YAML file, or "-" for stdin
        inline: Inline JSON string

    Returns:
        The decoded option bag

    Raises:
        OptionsLoadError: If the input cannot be read, parsed, or is not a mapping
    """
    if inline:
        return _decode(inline, as_yaml=False, source="--options")

    if file and file != "-":
        path = Path(file)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise OptionsLoadError(f"File not found: {file}") from e
        except OSError as e:
            raise OptionsLoadError(f"Error reading file: {e}") from e
        return _decode(text, as_yaml=path.suffix.lower() in YAML_SUFFIXES, source=file)

    if file == "-" or not sys.stdin.isatty():
        # YAML is a superset of JSON, so stdin accepts either
        return _decode(sys.stdin.read(), as_yaml=True, source="stdin")

    raise OptionsLoadError("No options given. Pass a file, --options, or pipe to stdin.")
