"""mediamod CLI - Main entry point."""

import logging

import typer
from rich.logging import RichHandler

from cli.commands.build import build_command
from cli.commands.fields import fields_command
from cli.utils.config import load_config
from cli.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="mediamod",
    help="mediamod CLI - Build media delivery modifier paths",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Register standalone commands
app.command(name="build")(build_command)
app.command(name="fields")(fields_command)


def configure_logging(level: int) -> None:
    """Send log records through rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log ignored and dropped options"
    ),
):
    """mediamod CLI for turning transformation options into modifier paths."""
    if verbose or load_config().verbose:
        configure_logging(logging.DEBUG)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
