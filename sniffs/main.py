from __future__ import annotations

"""
Typer CLI entry point for listing phpcs sniffs.

Commands:
- list: discover installed standards, list their sniffs and print the
  catalog (Rich tables, or JSON with --json)
- standards: print the installed standard names only

All failures the user can act on (phpcs missing, no output) end with a
one-line message and exit code 1.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from sniffs.config import DEFAULT_TIMEOUT, Config
from sniffs.discovery import get_installed_standards
from sniffs.errors import SniffsError
from sniffs.locator import resolve_phpcs
from sniffs.pipeline import list_phpcs_sniffs
from sniffs.process import run_command
from sniffs.reporting.console import catalog_to_json, print_catalog, print_standards

logger = logging.getLogger(__name__)

app = typer.Typer(help="List PHP_CodeSniffer sniffs for all installed standards.")

PhpcsOption = typer.Option(
    None,
    "--phpcs",
    envvar="PHPCS_PATH",
    help="Path to the phpcs executable (default: search PATH).",
)
TimeoutOption = typer.Option(
    DEFAULT_TIMEOUT,
    "--timeout",
    min=1.0,
    help="Seconds to wait for each phpcs invocation.",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log each step to stderr.")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(exc: SniffsError) -> typer.Exit:
    typer.echo(str(exc), err=True)
    return typer.Exit(code=1)


@app.command("list")
def list_sniffs(
    phpcs: Optional[Path] = PhpcsOption,
    timeout: float = TimeoutOption,
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON."),
    hide_empty: bool = typer.Option(False, "--hide-empty", help="Skip standards without sniffs."),
    verbose: bool = VerboseOption,
) -> None:
    """
    List every sniff of every installed standard, grouped by standard.

    Deprecated sniffs are shown separately from active ones.
    """
    _setup_logging(verbose)
    config = Config(phpcs_path=phpcs, timeout=timeout, include_empty=not hide_empty)

    try:
        catalog = list_phpcs_sniffs(config, runner=run_command)
    except SniffsError as exc:
        raise _fail(exc)

    if as_json:
        typer.echo(catalog_to_json(catalog, include_empty=config.include_empty))
        return
    print_catalog(catalog, include_empty=config.include_empty)


@app.command()
def standards(
    phpcs: Optional[Path] = PhpcsOption,
    timeout: float = TimeoutOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the installed coding standards, one per line."""
    _setup_logging(verbose)
    try:
        found = get_installed_standards(resolve_phpcs(phpcs), runner=run_command, timeout=timeout)
    except SniffsError as exc:
        raise _fail(exc)
    print_standards(found)


def main() -> None:
    """Entry point for `python -m sniffs.main` and the list-phpcs-sniffs script."""
    app()


if __name__ == "__main__":
    main()
