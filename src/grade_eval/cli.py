"""grade-eval command-line entry point."""

import typer

from grade_eval.commands.evaluate import evaluate_command
from grade_eval.commands.init import init_command
from grade_eval.commands.strategies import strategies_command

app = typer.Typer(
    name="grade-eval",
    help="Course grade evaluation with swappable scoring strategies",
    no_args_is_help=True,
)

app.command("evaluate")(evaluate_command)
app.command("strategies")(strategies_command)
app.command("init")(init_command)


if __name__ == "__main__":
    app()
