"""Rich formatting utilities for the CLI.

Everything that reaches the terminal besides the copied character itself
goes through here. Diagnostics use ``err_console`` so standard output only
ever carries the character.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from copychar.domain.models.symbols import Category, Character

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(level: str) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Warnings / errors
# ---------------------------------------------------------------------------


def warning_message(message: str) -> None:
    """Print a yellow warning line to stderr."""
    err_console.print(f"[bold yellow]Warning:[/] {message}", highlight=False)


def error_message(message: str) -> None:
    """Print a red error line to stderr."""
    err_console.print(f"[bold red]Error:[/] {message}", highlight=False)


# ---------------------------------------------------------------------------
# Symbol listing
# ---------------------------------------------------------------------------


def symbols_table(groups: dict[Category, list[Character]]) -> None:
    """Print every available symbol, grouped by category."""
    table = Table(title="Available characters", show_header=True, border_style="blue")
    table.add_column("Category", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Char", justify="center", style="bold green")
    table.add_column("Codepoint", style="dim")

    for category, chars in groups.items():
        for i, ch in enumerate(chars):
            table.add_row(category.value if i == 0 else "", ch.symbol.value, ch.text, ch.label)
        table.add_section()

    console.print(table)
