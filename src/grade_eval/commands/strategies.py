"""Strategies command for grade-eval CLI.

Lists registered scoring strategies and their effective thresholds.
"""

import typer
from rich.table import Table

from grade_eval.cli_utils import _load_config_or_exit, console


def strategies_command(
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
) -> None:
    """List available scoring strategies.

    Thresholds reflect overrides from the loaded configuration; strategies
    evaluated by default are marked in the last column.
    """
    from grade_eval.evaluation import available_strategies, get_strategy_class

    cfg = _load_config_or_exit(config, project)

    table = Table(title="Scoring strategies")
    table.add_column("Name", style="cyan")
    table.add_column("Formula")
    table.add_column("Passes when", justify="right")
    table.add_column("Default", justify="center")

    for name in available_strategies():
        strategy_cls = get_strategy_class(name)
        threshold = cfg.threshold_for(name)
        if threshold is None:
            threshold = strategy_cls.default_threshold
        table.add_row(
            name,
            strategy_cls.formula,
            f"> {threshold:g}",
            "yes" if name in cfg.strategies else "",
        )

    console.print(table)
