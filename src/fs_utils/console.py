"""Console output for the CLI."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from fs_utils.config import CONFIG_KEYS, Settings


class ConsoleOutput:
    """Formats command results for the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def show_text(self, text: str) -> None:
        """Print file content without markup or highlighting."""
        self.console.print(text, markup=False, highlight=False, end="")

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question, defaulting to no."""
        return Confirm.ask(escape(message), console=self.console, default=False)

    def show_settings(self, config_file: Path, settings: Settings) -> None:
        """Show the active configuration."""
        table = Table(title="Configuration", show_header=True, header_style="bold")
        table.add_column("Key")
        table.add_column("Value")
        for key, field_name in CONFIG_KEYS.items():
            table.add_row(key, escape(repr(getattr(settings, field_name))))
        self.console.print(table)
        self.console.print(f"  Config file: {escape(str(config_file))}")
