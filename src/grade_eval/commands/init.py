"""Init command for grade-eval CLI.

Writes a default grade-eval.yaml into a project directory.
"""

from pathlib import Path

import typer

from grade_eval.cli_utils import (
    EXIT_ERROR,
    _error,
    _success,
    console,
)


def init_command(
    project: str = typer.Option(
        ".",
        "--project",
        "-p",
        help="Path to project directory to initialize",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would be done without making changes",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration if present",
    ),
) -> None:
    """Create a default grade-eval.yaml.

    Existing configuration is left untouched unless --force is given.

    Examples:
        grade-eval init                    # Initialize current directory
        grade-eval init -p ./my-course     # Initialize specific directory
        grade-eval init --dry-run          # Preview the file contents

    """
    from grade_eval.core.config import CONFIG_FILENAME, default_config_yaml

    project_path = Path(project).resolve()

    if not project_path.exists():
        _error(f"Project directory does not exist: {project_path}")
        raise typer.Exit(code=EXIT_ERROR)

    if not project_path.is_dir():
        _error(f"Path is not a directory: {project_path}")
        raise typer.Exit(code=EXIT_ERROR)

    config_path = project_path / CONFIG_FILENAME
    content = default_config_yaml()

    if config_path.exists() and not force:
        console.print(f"  [dim]Already exists:[/dim] {config_path}")
        console.print("[yellow]Use --force to overwrite.[/yellow]")
        return

    if dry_run:
        console.print(f"  [dim]Would write:[/dim] {config_path}")
        console.print(content, markup=False, highlight=False)
        console.print("[yellow]Dry run - no changes made. Run without --dry-run to apply.[/yellow]")
        return

    config_path.write_text(content, encoding="utf-8")
    _success(f"Created {config_path}")
