"""Grade evaluation: scoring strategies, registry, evaluator and reports."""

from grade_eval.evaluation.evaluator import (
    Evaluation,
    GradeEvaluator,
    SubjectReport,
    evaluate,
    validate_score,
)
from grade_eval.evaluation.registry import (
    available_strategies,
    get_strategy,
    get_strategy_class,
    register_strategy,
)
from grade_eval.evaluation.report import build_report_table, format_evaluation
from grade_eval.evaluation.strategies import ArithmeticMean, GeometricMean, ScoreStrategy

__all__ = [
    # Strategies
    "ScoreStrategy",
    "ArithmeticMean",
    "GeometricMean",
    # Registry
    "register_strategy",
    "get_strategy",
    "get_strategy_class",
    "available_strategies",
    # Evaluation
    "Evaluation",
    "SubjectReport",
    "GradeEvaluator",
    "evaluate",
    "validate_score",
    # Reporting
    "format_evaluation",
    "build_report_table",
]
