"""
Run configuration for the curve pipeline.

Configuration is an explicit dataclass. YAML files and CLI flags are
converted to it through config_from_dict, which is the only place values
are validated.

Example YAML:

    count: 25
    t: 0.785398
    workers: 4
    kind: circle
    seed: 7
    radius_range: [0.1, 100.0]
    step_range: [0.1, 100.0]
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import yaml

from curvekit.curves import CurveKind
from curvekit.generation import DEFAULT_RADIUS_RANGE, DEFAULT_STEP_RANGE
from curvekit.reduction import DEFAULT_WORKERS


DEFAULT_COUNT = 10
DEFAULT_T = math.pi / 4


class ConfigError(Exception):
    """Raised when a configuration value or file is invalid."""
    pass


@dataclass(frozen=True)
class PipelineConfig:
    """
    Settings for one pipeline run.

    Properties:
        count: Number of random curves to generate
        t: Parameter every curve is evaluated at (radians)
        workers: Thread pool size for the radius reduction
        kind: Curve kind kept by the filter step
        seed: Seed for the random generator; None for a fresh seed
        radius_range: (low, high) for random radii
        step_range: (low, high) for random helix steps
    """

    count: int = DEFAULT_COUNT
    t: float = DEFAULT_T
    workers: int = DEFAULT_WORKERS
    kind: CurveKind = CurveKind.CIRCLE
    seed: Optional[int] = None
    radius_range: Tuple[float, float] = DEFAULT_RADIUS_RANGE
    step_range: Tuple[float, float] = DEFAULT_STEP_RANGE


_KNOWN_KEYS = {"count", "t", "workers", "kind", "seed", "radius_range", "step_range"}


def _as_int(name: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{name} must be finite, got {value!r}")
    return float(value)


def _as_range(name: str, value: Any) -> Tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{name} must be a [low, high] pair, got {value!r}")
    low = _as_float(f"{name}[0]", value[0])
    high = _as_float(f"{name}[1]", value[1])
    if low <= 0 or high < low:
        raise ConfigError(f"{name} must satisfy 0 < low <= high, got [{low}, {high}]")
    return (low, high)


def _as_kind(value: Any) -> CurveKind:
    if isinstance(value, CurveKind):
        return value
    try:
        return CurveKind(str(value).lower())
    except ValueError:
        choices = ", ".join(k.value for k in CurveKind)
        raise ConfigError(f"kind must be one of: {choices}; got {value!r}")


def config_from_dict(d: Dict[str, Any]) -> PipelineConfig:
    """
    Build a validated PipelineConfig.

    Missing keys fall back to defaults; unknown keys are rejected.

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    unknown = set(d) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    defaults = PipelineConfig()
    seed = d.get("seed", defaults.seed)
    return PipelineConfig(
        count=_as_int("count", d.get("count", defaults.count), minimum=0),
        t=_as_float("t", d.get("t", defaults.t)),
        workers=_as_int("workers", d.get("workers", defaults.workers), minimum=1),
        kind=_as_kind(d.get("kind", defaults.kind)),
        seed=None if seed is None else _as_int("seed", seed, minimum=0),
        radius_range=_as_range("radius_range", d.get("radius_range", defaults.radius_range)),
        step_range=_as_range("step_range", d.get("step_range", defaults.step_range)),
    )


def config_to_dict(c: PipelineConfig) -> Dict[str, Any]:
    return {
        "count": c.count,
        "t": c.t,
        "workers": c.workers,
        "kind": c.kind.value,
        "seed": c.seed,
        "radius_range": list(c.radius_range),
        "step_range": list(c.step_range),
    }


def config_to_yaml(c: PipelineConfig) -> str:
    return yaml.safe_dump(config_to_dict(c), sort_keys=False)


def config_from_yaml(s: str) -> PipelineConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML configuration: {e}")
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")
    return config_from_dict(d)


def load_config(filepath: str) -> PipelineConfig:
    """
    Read a YAML configuration file.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {filepath}: {e}")
    return config_from_yaml(content)


__all__ = [
    "ConfigError",
    "DEFAULT_COUNT",
    "DEFAULT_T",
    "PipelineConfig",
    "config_from_dict",
    "config_from_yaml",
    "config_to_dict",
    "config_to_yaml",
    "load_config",
]
