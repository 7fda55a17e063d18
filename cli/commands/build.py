"""Build command - render an option set to a modifier path."""

import typer

from cli.utils.config import apply_defaults, load_config
from cli.utils.formatting import BuildFormat, print_error, to_json
from cli.utils.options_io import OptionsLoadError, load_options
from modifiers import modify, to_modification_string


def build_command(
    file: str | None = typer.Argument(
        None, help="JSON or YAML options file, or - to read stdin"
    ),
    options: str | None = typer.Option(
        None, "--options", "-o", help="Inline JSON options"
    ),
    no_defaults: bool = typer.Option(
        False, "--no-defaults", help="Ignore default options from the config file"
    ),
    format: BuildFormat = typer.Option(
        BuildFormat.TEXT,
        "--format",
        "-f",
        help="Output format: text (default) or json",
        case_sensitive=False,
    ),
):
    """Render options to a modifier path segment.

    Options can be provided via --options, a file, or stdin.
    """
    try:
        data = load_options(file, options)
    except OptionsLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not no_defaults:
        data = apply_defaults(data, load_config())

    modifications = modify(data)
    path = to_modification_string(modifications)

    if format == BuildFormat.JSON:
        typer.echo(to_json({"modifications": modifications, "path": path}))
    else:
        typer.echo(path)
