"""Exception hierarchy for grade-eval.

All errors raised by the library inherit from GradeEvalError so callers
can catch a single base class. Errors propagate immediately; nothing in
the library retries or recovers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class GradeEvalError(Exception):
    """Base exception for grade-eval.

    All grade-eval specific exceptions inherit from this class.
    """

    pass


class InvalidInputError(GradeEvalError):
    """Invalid score passed to an evaluation.

    Raised when:
    - A score is not a real number (strings, None, booleans)
    - A score is NaN or infinite
    - A score falls outside the configured bounds

    Attributes:
        field: Name of the offending input (e.g., "a", "p1").
        value: The rejected value.

    """

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        """Initialize InvalidInputError with context.

        Args:
            message: Human-readable error message.
            field: Name of the offending input.
            value: The rejected value.

        """
        super().__init__(message)
        self.field = field
        self.value = value


class UnknownStrategyError(GradeEvalError):
    """Requested scoring strategy is not registered.

    Attributes:
        name: The name that was looked up.
        available: Registered strategy names at lookup time.

    """

    def __init__(self, name: str, available: list[str]) -> None:
        """Initialize UnknownStrategyError.

        Args:
            name: The name that was looked up.
            available: Registered strategy names.

        """
        super().__init__(
            f"Unknown strategy: '{name}'. Available: {', '.join(available) or 'none'}"
        )
        self.name = name
        self.available = available


class ConfigError(GradeEvalError):
    """Configuration file could not be loaded or is invalid.

    Attributes:
        path: Path of the config file involved, if any.

    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize ConfigError.

        Args:
            message: Human-readable error message.
            path: Path of the config file involved.

        """
        super().__init__(message)
        self.path = path
