"""Thin CLI wrapper: the ``cb`` command delegates to the CopySymbol use case.

All clipboard logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from copychar import __version__
from copychar.domain.models.symbols import Symbol
from copychar.presentation.cli.formatters import (
    configure_logging,
    error_message,
    symbols_table,
    warning_message,
)

app = typer.Typer(
    name="cb",
    help=(
        "Conveniently copy characters to clipboard.\n\n"
        "Copies commonly used characters that are difficult to type, "
        "and prints them to standard output."
    ),
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cb {__version__}")
        raise typer.Exit()


def _list_callback(value: bool) -> None:
    if value:
        from copychar.domain.models.symbols import by_category

        symbols_table(by_category())
        raise typer.Exit()


# ---------------------------------------------------------------------------
# cb <name>
# ---------------------------------------------------------------------------


@app.command()
def copy(
    name: Annotated[
        Symbol,
        typer.Argument(help="Character you wish to copy to clipboard.", show_default=False),
    ],
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log clipboard backend decisions to stderr")
    ] = False,
    list_symbols: Annotated[
        Optional[bool],
        typer.Option(
            "--list",
            "-l",
            help="List the available characters and exit.",
            callback=_list_callback,
            is_eager=True,
        ),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Copy the character called NAME to the clipboard and print it."""
    from copychar.bootstrap import Container
    from copychar.config import CopyCharConfig, get_config
    from copychar.domain.errors import ConfigurationError

    try:
        config = get_config()
    except ConfigurationError as e:
        # A broken config file must not cost the user the character
        error_message(f"{e}; using built-in defaults")
        config = CopyCharConfig()

    configure_logging("DEBUG" if verbose else config.logging.level)

    container = Container(config=config)
    result = container.copy_symbol().execute(name)

    # Standard output is the authoritative channel, whatever happened above
    typer.echo(result.character.text)

    if not result.outcome.succeeded:
        warning_message(f"clipboard could not be populated with {result.character.text}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
