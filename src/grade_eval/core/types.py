"""Core type definitions for grade-eval.

Type aliases and small helpers shared by the evaluation and CLI layers.
"""

from __future__ import annotations

from typing import Final, Literal, TypeAlias

# Raw score as accepted by the public API (booleans are rejected at runtime)
Score: TypeAlias = int | float

# Display label for a pass/fail verdict
VerdictLabel: TypeAlias = Literal["Approved", "Failed"]

APPROVED: Final[VerdictLabel] = "Approved"
FAILED: Final[VerdictLabel] = "Failed"


def verdict_label(passed: bool) -> VerdictLabel:
    """Convert a pass/fail boolean to its display label.

    Args:
        passed: Verdict of an evaluation.

    Returns:
        "Approved" if passed, otherwise "Failed".

    Examples:
        >>> verdict_label(True)
        'Approved'
        >>> verdict_label(False)
        'Failed'

    """
    return APPROVED if passed else FAILED


def normalize_strategy_name(name: str) -> str:
    """Normalize a strategy name for registry lookup.

    Examples:
        >>> normalize_strategy_name("  Geometric ")
        'geometric'

    """
    return name.strip().lower()
