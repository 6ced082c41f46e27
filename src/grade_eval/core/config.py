"""Configuration models and loading for grade-eval.

Configuration is read from a YAML file (``grade-eval.yaml`` by default) and
validated with Pydantic. There is no process-wide config singleton: callers
load a Config and pass it to the GradeEvaluator they own.

Usage:
    from grade_eval.core.config import load_config

    config = load_config(project_path=Path("."))
    evaluator = GradeEvaluator(config)
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Final, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from grade_eval.core.exceptions import ConfigError
from grade_eval.core.types import normalize_strategy_name

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = "grade-eval.yaml"

# Config files are tiny; anything larger is almost certainly the wrong file
MAX_CONFIG_SIZE: Final[int] = 64 * 1024

DEFAULT_STRATEGIES: Final[tuple[str, ...]] = ("arithmetic", "geometric")


def _require_finite(value: float | None, label: str) -> float | None:
    if value is not None and not math.isfinite(value):
        raise ValueError(f"{label} must be a finite number, got {value}")
    return value


class ScoreBoundsConfig(BaseModel):
    """Optional inclusive bounds applied to every input score.

    Attributes:
        minimum: Lowest accepted score, or None for no lower bound.
        maximum: Highest accepted score, or None for no upper bound.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum: float | None = Field(default=None, description="Lowest accepted score")
    maximum: float | None = Field(default=None, description="Highest accepted score")

    @field_validator("minimum", "maximum", mode="after")
    @classmethod
    def validate_finite(cls, v: float | None) -> float | None:
        """Reject NaN and infinite bounds."""
        return _require_finite(v, "Score bound")

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        """Ensure minimum does not exceed maximum."""
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError(
                f"bounds.minimum ({self.minimum}) must not exceed bounds.maximum ({self.maximum})"
            )
        return self

    def contains(self, value: float) -> bool:
        """Check whether value lies within the bounds."""
        if self.minimum is not None and value < self.minimum:
            return False
        return not (self.maximum is not None and value > self.maximum)


class Config(BaseModel):
    """Top-level grade-eval configuration.

    Attributes:
        strategies: Strategy names evaluated by default, in display order.
        thresholds: Per-strategy pass threshold overrides.
        bounds: Accepted range for input scores.
        precision: Decimal places used in console output.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STRATEGIES),
        min_length=1,
        description="Strategies evaluated by default, in display order",
    )
    thresholds: dict[str, float] = Field(
        default_factory=dict,
        description="Per-strategy pass threshold overrides",
    )
    bounds: ScoreBoundsConfig = Field(default_factory=ScoreBoundsConfig)
    precision: int = Field(default=2, ge=0, le=6, description="Decimals in console output")

    @field_validator("strategies", mode="after")
    @classmethod
    def normalize_strategies(cls, v: list[str]) -> list[str]:
        """Normalize names and reject duplicates."""
        normalized = [normalize_strategy_name(name) for name in v]
        duplicates = sorted({name for name in normalized if normalized.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate strategies: {', '.join(duplicates)}")
        return normalized

    @field_validator("thresholds", mode="after")
    @classmethod
    def normalize_thresholds(cls, v: dict[str, float]) -> dict[str, float]:
        """Normalize keys and reject non-finite thresholds."""
        result: dict[str, float] = {}
        for name, threshold in v.items():
            _require_finite(threshold, f"Threshold for '{name}'")
            result[normalize_strategy_name(name)] = threshold
        return result

    def threshold_for(self, name: str) -> float | None:
        """Return the configured threshold override for a strategy, if any."""
        return self.thresholds.get(normalize_strategy_name(name))


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read and parse a YAML config file.

    Raises:
        ConfigError: If the file is missing, too large, unreadable or not a mapping.

    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}", path=path)

    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE:
        raise ConfigError(
            f"Config file {path} is {size} bytes, exceeds limit of {MAX_CONFIG_SIZE} bytes",
            path=path,
        )

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}", path=path) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}", path=path
        )
    return data


def _check_strategy_names(config: Config, path: Path) -> None:
    """Raise ConfigError if the config names an unregistered strategy."""
    # Imported here to avoid a circular import with the evaluation package
    from grade_eval.evaluation.registry import available_strategies

    available = available_strategies()
    unknown = sorted(
        {name for name in (*config.strategies, *config.thresholds) if name not in available}
    )
    if unknown:
        raise ConfigError(
            f"Unknown strategies in {path}: {', '.join(unknown)}. "
            f"Available: {', '.join(available)}",
            path=path,
        )


def load_config(path: Path | None = None, project_path: Path | None = None) -> Config:
    """Load configuration from YAML.

    Resolution order:
    1. ``path`` if given (must exist).
    2. ``project_path / grade-eval.yaml`` if it exists.
    3. Built-in defaults.

    Args:
        path: Explicit config file path.
        project_path: Directory searched for grade-eval.yaml.

    Returns:
        Validated Config instance.

    Raises:
        ConfigError: If the file cannot be read or fails validation.

    """
    if path is None and project_path is not None:
        candidate = project_path / CONFIG_FILENAME
        if candidate.is_file():
            path = candidate

    if path is None:
        logger.debug("No config file found, using defaults")
        return Config()

    data = _read_config_file(path)
    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}:\n{e}", path=path) from e

    _check_strategy_names(config, path)
    logger.debug("Loaded config from %s: strategies=%s", path, config.strategies)
    return config


def default_config_yaml() -> str:
    """Render the default configuration as commented YAML."""
    body = yaml.safe_dump(
        {
            "strategies": list(DEFAULT_STRATEGIES),
            "thresholds": {},
            "bounds": {"minimum": 0.0, "maximum": 10.0},
            "precision": 2,
        },
        sort_keys=False,
        default_flow_style=False,
    )
    return "# grade-eval configuration\n" + body
