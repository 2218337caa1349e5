"""Matching defaults loaded from the environment and an optional YAML file.

Example YAML configuration:

    matching:
      threshold: 0.4
      distance: 500
      max_bits: 32
      cache_size: 256

Precedence: environment variables, then the YAML file named by
``FUZZY_LOCATE_CONFIG_PATH``, then built-in defaults.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from fuzzy_locate.core.options import (
    DEFAULT_DISTANCE,
    DEFAULT_MAX_BITS,
    DEFAULT_THRESHOLD,
    MatchOptions,
)

ENV_PREFIX = "FUZZY_LOCATE_"
CONFIG_PATH_ENV = "FUZZY_LOCATE_CONFIG_PATH"


@dataclass(frozen=True)
class Settings:
    """Default matching settings.

    Attributes:
        threshold: Default score threshold (0.0 to 1.0).
        distance: Default location tolerance, a whole number as typed into
            the harness distance field.
        max_bits: Widest pattern handled by the bit-parallel search.
        cache_size: Capacity of the shared alphabet cache used by the API.
    """

    threshold: float = DEFAULT_THRESHOLD
    distance: int = int(DEFAULT_DISTANCE)
    max_bits: int = DEFAULT_MAX_BITS
    cache_size: int = 128

    def __post_init__(self) -> None:
        """Validate configuration values."""
        # MatchOptions owns the range checks for the shared fields
        self.match_options()
        if self.distance != int(self.distance):
            raise ValueError(f"distance must be a whole number, got {self.distance}")
        if self.cache_size < 1:
            raise ValueError(f"cache_size must be positive, got {self.cache_size}")

    def match_options(self) -> MatchOptions:
        return MatchOptions(
            threshold=self.threshold,
            distance=self.distance,
            max_bits=self.max_bits,
        )


def _whole_number(value: Any) -> int:
    """Convert to int without truncating fractional values."""
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"not a whole number: {value}")
        return int(value)
    return int(value)


_CONVERTERS = {
    "threshold": float,
    "distance": _whole_number,
    "max_bits": _whole_number,
    "cache_size": _whole_number,
}


def _coerce(values: Mapping[str, Any], source: str) -> dict[str, Any]:
    coerced = {}
    for key, value in values.items():
        if key not in _CONVERTERS:
            raise ValueError(f"Unknown setting in {source}: {key}")
        try:
            coerced[key] = _CONVERTERS[key](value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for {key} in {source}: {value!r}") from e
    return coerced


def load_settings_from_yaml(path: Path | str) -> dict[str, Any]:
    """Read the ``matching`` section of a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Mapping of setting names to converted values.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML structure or a value is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    matching = data.get("matching", {}) or {}
    if not isinstance(matching, dict):
        raise ValueError(
            f"Invalid matching structure: expected dict, got {type(matching).__name__}"
        )

    return _coerce(matching, str(path))


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from the environment and optional YAML file.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.

    Raises:
        ValueError: If a value cannot be converted or is out of range.
    """
    if environ is None:
        environ = os.environ

    values: dict[str, Any] = {}

    config_path = environ.get(CONFIG_PATH_ENV)
    if config_path:
        values.update(load_settings_from_yaml(config_path))

    env_values = {}
    for f in fields(Settings):
        raw = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if raw is not None and raw.strip():
            env_values[f.name] = raw.strip()
    values.update(_coerce(env_values, "environment"))

    return Settings(**values)
