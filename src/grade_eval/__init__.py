"""grade-eval - course grade evaluation with swappable scoring strategies."""

from importlib.metadata import version

from grade_eval.evaluation import (
    ArithmeticMean,
    Evaluation,
    GeometricMean,
    GradeEvaluator,
    ScoreStrategy,
    SubjectReport,
    evaluate,
    get_strategy,
)

try:
    __version__ = version("grade-eval")
except Exception:
    __version__ = "0.0.0-dev"

__all__ = [
    "ArithmeticMean",
    "Evaluation",
    "GeometricMean",
    "GradeEvaluator",
    "ScoreStrategy",
    "SubjectReport",
    "evaluate",
    "get_strategy",
]
