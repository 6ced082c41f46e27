"""Scoring strategies: how two exam scores become one aggregate.

Each strategy pairs a pure ``compute(a, b)`` with a strict threshold check
``passes(aggregate)``. Built-in strategies:

    arithmetic  (a + b) / 2    passes when aggregate > 5.0
    geometric   sqrt(a * b)    passes when aggregate > 7.0

The geometric mean of a negative product is not a real number; it is
reported as NaN, which never passes.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import ClassVar

from grade_eval.core.exceptions import InvalidInputError

from .registry import register_strategy

logger = logging.getLogger(__name__)


class ScoreStrategy(ABC):
    """Abstract base class for scoring strategies.

    Subclasses set ``name``, ``formula`` and ``default_threshold`` and
    implement ``compute``. Instances are immutable once built.

    Attributes:
        threshold: Aggregate must be strictly greater than this to pass.

    """

    name: ClassVar[str]
    formula: ClassVar[str]
    default_threshold: ClassVar[float]

    __slots__ = ("_threshold",)

    def __init__(self, threshold: float | None = None) -> None:
        """Initialize the strategy.

        Args:
            threshold: Pass threshold override (defaults to default_threshold).

        Raises:
            InvalidInputError: If threshold is not a finite number.

        """
        if threshold is None:
            threshold = self.default_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise InvalidInputError(
                f"threshold must be a number, got {type(threshold).__name__}",
                field="threshold",
                value=threshold,
            )
        try:
            value = float(threshold)
        except OverflowError as e:
            raise InvalidInputError(
                "threshold is too large to represent as float", field="threshold", value=threshold
            ) from e
        if not math.isfinite(value):
            raise InvalidInputError(
                f"threshold must be a finite number, got {value}",
                field="threshold",
                value=threshold,
            )
        self._threshold = value

    @property
    def threshold(self) -> float:
        """Pass threshold for this instance."""
        return self._threshold

    @abstractmethod
    def compute(self, a: float, b: float) -> float:
        """Combine two scores into an aggregate."""

    def passes(self, aggregate: float) -> bool:
        """Return True when the aggregate is strictly above the threshold."""
        return aggregate > self._threshold

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScoreStrategy):
            return NotImplemented
        return type(self) is type(other) and self._threshold == other._threshold

    def __hash__(self) -> int:
        return hash((type(self), self._threshold))

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{type(self).__name__}(threshold={self._threshold})"


@register_strategy
class ArithmeticMean(ScoreStrategy):
    """Plain average of the two scores."""

    name = "arithmetic"
    formula = "(a + b) / 2"
    default_threshold = 5.0

    __slots__ = ()

    def compute(self, a: float, b: float) -> float:
        # Halve first so two large finite scores cannot overflow to inf
        return a / 2 + b / 2


@register_strategy
class GeometricMean(ScoreStrategy):
    """Square root of the product; penalizes uneven scores."""

    name = "geometric"
    formula = "sqrt(a * b)"
    default_threshold = 7.0

    __slots__ = ()

    def compute(self, a: float, b: float) -> float:
        if (a < 0 < b) or (b < 0 < a):
            logger.warning(
                "Geometric mean undefined for negative product (a=%s, b=%s), returning NaN",
                a,
                b,
            )
            return math.nan
        # sqrt(|a|) * sqrt(|b|) == sqrt(a * b) without overflowing the product
        return math.sqrt(abs(a)) * math.sqrt(abs(b))
