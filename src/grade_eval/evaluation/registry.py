"""Name-based registry for scoring strategies."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from grade_eval.core.exceptions import UnknownStrategyError
from grade_eval.core.types import normalize_strategy_name

if TYPE_CHECKING:
    from .strategies import ScoreStrategy

logger = logging.getLogger(__name__)

_STRATEGIES: dict[str, type[ScoreStrategy]] = {}
_discovered = False

# Modules whose import registers the built-in strategies
_BUILTIN_MODULES: tuple[str, ...] = ("grade_eval.evaluation.strategies",)


def register_strategy(strategy_class: type[ScoreStrategy]) -> type[ScoreStrategy]:
    """Register a strategy class. Can be used as a decorator or called directly."""
    name = normalize_strategy_name(strategy_class.name)
    existing = _STRATEGIES.get(name)
    if existing is not None and existing is not strategy_class:
        logger.warning(
            "Strategy '%s' re-registered: %s replaces %s",
            name,
            strategy_class.__qualname__,
            existing.__qualname__,
        )
    _STRATEGIES[name] = strategy_class
    return strategy_class


def _discover_strategies() -> None:
    """Import the built-in strategy modules once."""
    global _discovered  # noqa: PLW0603
    if _discovered:
        return
    _discovered = True
    for module_name in _BUILTIN_MODULES:
        importlib.import_module(module_name)


def get_strategy_class(name: str) -> type[ScoreStrategy]:
    """Look up a registered strategy class by name (case-insensitive)."""
    _discover_strategies()
    key = normalize_strategy_name(name)
    if key not in _STRATEGIES:
        raise UnknownStrategyError(name, sorted(_STRATEGIES))
    return _STRATEGIES[key]


def get_strategy(name: str, threshold: float | None = None) -> ScoreStrategy:
    """Get a strategy instance by name, optionally overriding its threshold."""
    return get_strategy_class(name)(threshold=threshold)


def available_strategies() -> list[str]:
    """Return the sorted names of all registered strategies."""
    _discover_strategies()
    return sorted(_STRATEGIES)
