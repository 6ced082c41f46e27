"""Console rendering of evaluations."""

from __future__ import annotations

import math

from rich.table import Table
from rich.text import Text

from .evaluator import Evaluation, SubjectReport


def _fmt(value: float, precision: int) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{value:.{precision}f}"


def format_evaluation(
    evaluation: Evaluation, precision: int = 2, show_strategy: bool = False
) -> str:
    """Format an evaluation as a single console line.

    Example:
        >>> format_evaluation(evaluate("arithmetic", 7.0, 3.0))
        'P1: 7.00 P2: 3.00 Average: 5.00 Status: Failed'

    """
    line = (
        f"P1: {_fmt(evaluation.a, precision)} "
        f"P2: {_fmt(evaluation.b, precision)} "
        f"Average: {_fmt(evaluation.aggregate, precision)} "
        f"Status: {evaluation.verdict}"
    )
    if show_strategy:
        return f"[{evaluation.strategy}] {line}"
    return line


def build_report_table(report: SubjectReport, precision: int = 2) -> Table:
    """Build a rich table with one row per strategy."""
    title = f"Subject: {report.subject}" if report.subject else None
    table = Table(title=title)
    table.add_column("Strategy", style="cyan")
    table.add_column("P1", justify="right")
    table.add_column("P2", justify="right")
    table.add_column("Average", justify="right")
    table.add_column("Threshold", justify="right", style="dim")
    table.add_column("Status")

    for evaluation in report.evaluations:
        status = Text(evaluation.verdict, style="green" if evaluation.passed else "red")
        table.add_row(
            evaluation.strategy,
            _fmt(evaluation.a, precision),
            _fmt(evaluation.b, precision),
            _fmt(evaluation.aggregate, precision),
            _fmt(evaluation.threshold, precision),
            status,
        )
    return table
