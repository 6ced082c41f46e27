"""Shared helpers for the grade-eval CLI: console, exit codes, logging."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

import typer
from rich.console import Console
from rich.markup import escape

from grade_eval.core.config import Config, load_config
from grade_eval.core.exceptions import ConfigError

EXIT_SUCCESS: Final[int] = 0
EXIT_ERROR: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2

console = Console()

# Prompts and diagnostics that must stay out of machine-readable stdout
err_console = Console(stderr=True)


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging for CLI runs.

    --verbose enables DEBUG, --quiet limits output to WARNING and above.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(level)


def _error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")


def _success(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]")


def _load_config_or_exit(config_path: str | None, project: str = ".") -> Config:
    """Load configuration, exiting with EXIT_CONFIG_ERROR on failure."""
    try:
        return load_config(
            path=Path(config_path) if config_path else None,
            project_path=Path(project),
        )
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from e
