"""Core module for grade-eval configuration, types and exceptions.

This module provides:
- Configuration models and YAML loading via load_config()
- Custom exception hierarchy with GradeEvalError as base
- Shared type aliases and verdict labels
"""

from grade_eval.core.config import (
    CONFIG_FILENAME,
    DEFAULT_STRATEGIES,
    MAX_CONFIG_SIZE,
    Config,
    ScoreBoundsConfig,
    default_config_yaml,
    load_config,
)
from grade_eval.core.exceptions import (
    ConfigError,
    GradeEvalError,
    InvalidInputError,
    UnknownStrategyError,
)
from grade_eval.core.types import (
    APPROVED,
    FAILED,
    Score,
    VerdictLabel,
    normalize_strategy_name,
    verdict_label,
)

__all__ = [
    # Config
    "CONFIG_FILENAME",
    "DEFAULT_STRATEGIES",
    "MAX_CONFIG_SIZE",
    "Config",
    "ScoreBoundsConfig",
    "default_config_yaml",
    "load_config",
    # Exceptions
    "ConfigError",
    "GradeEvalError",
    "InvalidInputError",
    "UnknownStrategyError",
    # Types
    "APPROVED",
    "FAILED",
    "Score",
    "VerdictLabel",
    "normalize_strategy_name",
    "verdict_label",
]
