"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, TypeVar

import typer

from fs_utils import __version__
from fs_utils.console import ConsoleOutput
from fs_utils.context import create_context

if TYPE_CHECKING:
    from fs_utils.types import OperationResult

T = TypeVar("T")

app = typer.Typer(
    name="fs-utils",
    help="Filesystem primitives: emptiness checks, safe directory copies, bounded reads",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

output = ConsoleOutput()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"fs-utils v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
) -> None:
    """Filesystem primitives: emptiness checks, safe directory copies, bounded reads."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _unwrap(result: OperationResult[T]) -> T | None:
    """Return a result's value, or report its error and exit.

    Raises:
        typer.Exit: If the result is a failure.
    """
    if not result.success:
        output.show_error(result.error or "Unknown error")
        raise typer.Exit(1)
    return result.value


# ============================================================================
# Directory Commands
# ============================================================================


@app.command()
def empty(
    path: Annotated[Path, typer.Argument(help="Directory to check")],
    _context=None,
) -> None:
    """Report whether a directory has no entries."""
    ctx = _context or create_context()
    is_empty = _unwrap(ctx.filesystem.is_folder_empty(path))
    output.show_info(f"'{path}' is {'empty' if is_empty else 'not empty'}")


@app.command()
def dest(
    source: Annotated[Path, typer.Argument(help="Directory that would be copied")],
    parent: Annotated[Path, typer.Argument(help="Directory the copy would be created in")],
    _context=None,
) -> None:
    """Show where a copy of SOURCE into PARENT would be created."""
    ctx = _context or create_context()
    destination = _unwrap(ctx.filesystem.destination_directory(source, parent))
    output.console.print(str(destination), markup=False, highlight=False)


@app.command()
def copy(
    source: Annotated[Path, typer.Argument(help="Directory to copy")],
    parent: Annotated[Path, typer.Argument(help="Existing directory that receives the copy")],
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth", min=1, help="Maximum subdirectory nesting (default from config)"
        ),
    ] = None,
    _context=None,
) -> None:
    """Copy SOURCE into a new subdirectory of PARENT.

    Refuses to run if the subdirectory already exists. A failed copy is not
    rolled back.
    """
    ctx = _context or create_context()
    depth = ctx.settings.max_depth if max_depth is None else max_depth
    destination = _unwrap(ctx.filesystem.copy_directory(source, parent, max_depth=depth))
    output.show_success(f"Copied '{source}' to '{destination}'")


@app.command()
def cleanup(
    path: Annotated[Path, typer.Argument(help="Directory to clear")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    _context=None,
) -> None:
    """Delete everything inside a directory, keeping the directory itself."""
    ctx = _context or create_context()

    if not yes and not output.confirm(f"Delete all contents of '{path}'?"):
        output.show_info("Cancelled")
        raise typer.Exit()

    _unwrap(ctx.filesystem.cleanup_folder(path))
    output.show_success(f"Cleared '{path}'")


# ============================================================================
# Read Commands
# ============================================================================


@app.command()
def head(
    path: Annotated[Path, typer.Argument(help="File to read")],
    limit: Annotated[
        int | None,
        typer.Option("--bytes", "-c", min=0, help="Number of bytes (default from config)"),
    ] = None,
    text: Annotated[
        bool, typer.Option("--text", "-t", help="Decode as UTF-8 instead of raw bytes")
    ] = False,
    message: Annotated[
        str | None,
        typer.Option("--message", "-m", help="Text appended when truncated (implies --text)"),
    ] = None,
    _context=None,
) -> None:
    """Print the first bytes of a file, like head -c."""
    ctx = _context or create_context()
    byte_limit = ctx.settings.head_bytes if limit is None else limit

    if not text and message is None:
        data = _unwrap(ctx.filesystem.head(path, byte_limit))
        typer.echo(data, nl=False)
        return

    suffix = ctx.settings.truncation_message if message is None else message
    content = _unwrap(ctx.filesystem.head_to_string_with_message(path, byte_limit, suffix))
    output.show_text(content)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    output.show_settings(ctx.config.config_file, ctx.config.load())


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Configuration key")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
    _context=None,
) -> None:
    """Set a configuration value."""
    ctx = _context or create_context()
    try:
        ctx.config.set_value(key, value)
    except ValueError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e
    output.show_success(f"Set {key} to {value}")


if __name__ == "__main__":
    app()
