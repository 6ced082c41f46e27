"""Evaluate command for grade-eval CLI.

Computes a subject's grade under one or more scoring strategies.
"""

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import FloatPrompt, Prompt

from grade_eval.cli_utils import (
    EXIT_ERROR,
    _error,
    _load_config_or_exit,
    _setup_logging,
    console,
    err_console,
)
from grade_eval.core.exceptions import GradeEvalError


def _prompt_scores(
    subject: str | None, p1: float | None, p2: float | None, prompt_console: Console
) -> tuple[str | None, float, float]:
    """Ask for whatever the command line left out."""
    if subject is None:
        subject = Prompt.ask("Subject name", default="", console=prompt_console) or None
    if p1 is None:
        p1 = FloatPrompt.ask("P1 score", console=prompt_console)
    if p2 is None:
        p2 = FloatPrompt.ask("P2 score", console=prompt_console)
    return subject, p1, p2


def evaluate_command(
    p1: float = typer.Option(
        None,
        "--p1",
        "-a",
        help="First exam score (prompted if omitted)",
    ),
    p2: float = typer.Option(
        None,
        "--p2",
        "-b",
        help="Second exam score (prompted if omitted)",
    ),
    subject: str = typer.Option(
        None,
        "--subject",
        "-s",
        help="Subject name shown in the report",
    ),
    strategy: list[str] = typer.Option(
        None,
        "--strategy",
        "-S",
        help="Strategy to apply; repeat for several (default: from config)",
    ),
    config: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to grade-eval.yaml",
    ),
    project: str = typer.Option(
        ".",
        "--project",
        "-p",
        help="Directory searched for grade-eval.yaml",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the report as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print warnings and errors in logs",
    ),
) -> None:
    """Evaluate two exam scores under the configured strategies.

    Missing scores are asked for interactively, one per line.

    Examples:
        grade-eval evaluate --p1 7 --p2 3              # All configured strategies
        grade-eval evaluate -a 9 -b 9 -S geometric     # Geometric mean only
        grade-eval evaluate -a 8 -b 2 --json           # Machine-readable output

    """
    from grade_eval.evaluation import GradeEvaluator, build_report_table, format_evaluation

    _setup_logging(verbose=verbose, quiet=quiet or as_json)
    cfg = _load_config_or_exit(config, project)

    if p1 is None or p2 is None:
        # JSON mode keeps stdout clean for the report
        prompt_console = err_console if as_json else console
        subject, p1, p2 = _prompt_scores(subject, p1, p2, prompt_console)

    try:
        evaluator = GradeEvaluator(cfg)
        report = evaluator.evaluate_subject(subject, p1, p2, strategies=strategy or None)
    except GradeEvalError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from e

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    if verbose:
        console.print(build_report_table(report, precision=cfg.precision))
        return

    if report.subject:
        console.print(f"[bold]Subject:[/bold] {escape(report.subject)}", highlight=False)
    for evaluation in report.evaluations:
        console.print(
            format_evaluation(evaluation, precision=cfg.precision, show_strategy=True),
            markup=False,
            highlight=False,
        )
