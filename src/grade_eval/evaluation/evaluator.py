"""Grade evaluation: apply a scoring strategy to two scores.

``evaluate`` is the pure core: it validates the two scores, computes the
aggregate with the strategy and derives the verdict from it. The
GradeEvaluator class wraps it with configuration (threshold overrides,
score bounds, default strategy list) for callers that evaluate many
subjects under the same settings.

Input policy:
    - scores must be int or float (bool is rejected)
    - NaN and infinite scores raise InvalidInputError
    - negative scores are accepted; geometric mean of a negative
      product yields NaN and fails
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from grade_eval.core.config import Config
from grade_eval.core.exceptions import InvalidInputError
from grade_eval.core.types import Score, VerdictLabel, normalize_strategy_name, verdict_label

from .registry import get_strategy, get_strategy_class
from .strategies import ScoreStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Result of applying one strategy to a pair of scores.

    Attributes:
        strategy: Name of the strategy that produced the result.
        a: First input score.
        b: Second input score.
        aggregate: Combined score (NaN when undefined for the inputs).
        passed: True when aggregate is strictly above threshold.
        threshold: Threshold the aggregate was compared against.

    """

    strategy: str
    a: float
    b: float
    aggregate: float
    passed: bool
    threshold: float

    @property
    def verdict(self) -> VerdictLabel:
        """Display label for the verdict."""
        return verdict_label(self.passed)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-safe dict (NaN aggregate becomes None)."""
        return {
            "strategy": self.strategy,
            "a": self.a,
            "b": self.b,
            "aggregate": self.aggregate if math.isfinite(self.aggregate) else None,
            "passed": self.passed,
            "threshold": self.threshold,
            "verdict": self.verdict,
        }


@dataclass(frozen=True, slots=True)
class SubjectReport:
    """Evaluations of one subject's P1/P2 scores under several strategies.

    Attributes:
        subject: Subject name, or None when not given.
        p1: First exam score.
        p2: Second exam score.
        evaluations: One Evaluation per strategy, in evaluation order.

    """

    subject: str | None
    p1: float
    p2: float
    evaluations: tuple[Evaluation, ...]

    def get(self, strategy: str) -> Evaluation | None:
        """Return the evaluation for a strategy name (case-insensitive), if present."""
        key = normalize_strategy_name(strategy)
        for evaluation in self.evaluations:
            if evaluation.strategy == key:
                return evaluation
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-safe dict."""
        return {
            "subject": self.subject,
            "p1": self.p1,
            "p2": self.p2,
            "evaluations": [e.to_dict() for e in self.evaluations],
        }


def validate_score(value: Any, field: str) -> float:
    """Validate a single score and return it as float.

    Args:
        value: Candidate score.
        field: Input name used in error messages.

    Returns:
        The score as float.

    Raises:
        InvalidInputError: If value is not a finite real number.

    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(
            f"Score '{field}' must be a number, got {type(value).__name__}",
            field=field,
            value=value,
        )
    try:
        score = float(value)
    except OverflowError as e:
        raise InvalidInputError(
            f"Score '{field}' is too large to represent as float",
            field=field,
            value=value,
        ) from e
    if not math.isfinite(score):
        raise InvalidInputError(
            f"Score '{field}' must be finite, got {score}",
            field=field,
            value=value,
        )
    return score


def _resolve(strategy: ScoreStrategy | str) -> ScoreStrategy:
    if isinstance(strategy, ScoreStrategy):
        return strategy
    return get_strategy(strategy)


def evaluate(strategy: ScoreStrategy | str, a: Score, b: Score) -> Evaluation:
    """Evaluate two scores with a strategy.

    Args:
        strategy: Strategy instance or registered strategy name.
        a: First score.
        b: Second score.

    Returns:
        Immutable Evaluation whose aggregate and verdict follow from the
        strategy applied to a and b.

    Raises:
        InvalidInputError: If a or b is not a finite real number.
        UnknownStrategyError: If strategy is an unregistered name.

    Example:
        >>> evaluate("arithmetic", 7.0, 3.0).passed
        False
        >>> evaluate("geometric", 9.0, 9.0).aggregate
        9.0

    """
    resolved = _resolve(strategy)
    a_value = validate_score(a, "a")
    b_value = validate_score(b, "b")

    aggregate = resolved.compute(a_value, b_value)
    passed = resolved.passes(aggregate)

    logger.debug(
        "Evaluated %s(a=%s, b=%s) -> aggregate=%s passed=%s",
        resolved.name,
        a_value,
        b_value,
        aggregate,
        passed,
    )
    return Evaluation(
        strategy=resolved.name,
        a=a_value,
        b=b_value,
        aggregate=aggregate,
        passed=passed,
        threshold=resolved.threshold,
    )


class GradeEvaluator:
    """Evaluator bound to a configuration.

    Applies configured threshold overrides and score bounds, and evaluates
    the configured strategy list by default. Instances hold no mutable
    state and may be shared between callers.

    Attributes:
        config: Configuration in effect.

    Example:
        >>> evaluator = GradeEvaluator()
        >>> report = evaluator.evaluate_subject("Algorithms", 7.0, 3.0)
        >>> [e.verdict for e in report.evaluations]
        ['Failed', 'Failed']

    """

    def __init__(self, config: Config | None = None) -> None:
        """Initialize GradeEvaluator.

        Args:
            config: Configuration (defaults to Config()).

        Raises:
            UnknownStrategyError: If the config names an unregistered strategy.

        """
        self.config = config or Config()
        # Fail fast on bad names instead of at first evaluation
        for name in (*self.config.strategies, *self.config.thresholds):
            get_strategy_class(name)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"GradeEvaluator(strategies={self.config.strategies!r})"

    def strategy_for(self, name: str) -> ScoreStrategy:
        """Build a strategy with the configured threshold override applied."""
        return get_strategy(name, threshold=self.config.threshold_for(name))

    def _check_bounds(self, value: float, field: str) -> None:
        bounds = self.config.bounds
        if not bounds.contains(value):
            raise InvalidInputError(
                f"Score '{field}'={value} outside allowed range "
                f"[{bounds.minimum if bounds.minimum is not None else '-inf'}, "
                f"{bounds.maximum if bounds.maximum is not None else 'inf'}]",
                field=field,
                value=value,
            )

    def evaluate(self, strategy: ScoreStrategy | str, a: Score, b: Score) -> Evaluation:
        """Evaluate with config bounds and threshold overrides applied.

        A strategy given by name picks up the configured threshold; a
        strategy instance is used as-is.

        Raises:
            InvalidInputError: If a score is invalid or out of bounds.
            UnknownStrategyError: If strategy is an unregistered name.

        """
        if isinstance(strategy, str):
            strategy = self.strategy_for(strategy)
        a_value = validate_score(a, "a")
        b_value = validate_score(b, "b")
        self._check_bounds(a_value, "a")
        self._check_bounds(b_value, "b")
        return evaluate(strategy, a_value, b_value)

    def evaluate_all(
        self,
        a: Score,
        b: Score,
        strategies: Sequence[ScoreStrategy | str] | None = None,
    ) -> tuple[Evaluation, ...]:
        """Evaluate the same scores under several strategies.

        Args:
            a: First score.
            b: Second score.
            strategies: Strategies to apply (defaults to config.strategies).

        Returns:
            One Evaluation per strategy, in order.

        """
        selected: Iterable[ScoreStrategy | str] = (
            strategies if strategies else self.config.strategies
        )
        return tuple(self.evaluate(strategy, a, b) for strategy in selected)

    def evaluate_subject(
        self,
        subject: str | None,
        p1: Score,
        p2: Score,
        strategies: Sequence[ScoreStrategy | str] | None = None,
    ) -> SubjectReport:
        """Evaluate a subject's P1/P2 scores and bundle the results.

        Args:
            subject: Subject name (blank names are stored as None).
            p1: First exam score.
            p2: Second exam score.
            strategies: Strategies to apply (defaults to config.strategies).

        Returns:
            SubjectReport with one Evaluation per strategy.

        """
        evaluations = self.evaluate_all(p1, p2, strategies)
        name = subject.strip() if subject else None
        logger.info(
            "Evaluated subject %s: %s",
            name or "<unnamed>",
            ", ".join(f"{e.strategy}={e.verdict}" for e in evaluations),
        )
        return SubjectReport(
            subject=name or None,
            p1=evaluations[0].a,
            p2=evaluations[0].b,
            evaluations=evaluations,
        )
