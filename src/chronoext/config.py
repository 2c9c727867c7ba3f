"""Default formatting patterns.

The patterns used when converting stdlib date/time values to text without an
explicit pattern. They are loaded once, from one of two sources:

    - a YAML file named by CHRONOEXT_CONFIG_FILE, with a ``pattern`` mapping
    - environment variables CHRONOEXT_PATTERN_<NAME>, such as
      CHRONOEXT_PATTERN_LOCAL_TIME=HH:mm

Patterns not given by the source keep their defaults.

Example YAML file:

    pattern:
      local_time: "HH:mm"
      local_date: "dd.MM.yyyy"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from .temporal.format import TemporalFormatter

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "CHRONOEXT_CONFIG_FILE"
PATTERN_ENV_PREFIX = "CHRONOEXT_PATTERN_"


@dataclass(frozen=True, kw_only=True)
class PatternConfig:
    """Default patterns per stdlib value type.

    Attributes:
        local_date: Pattern for datetime.date
        local_time: Pattern for datetime.time
        local_date_time: Pattern for naive datetime.datetime
        year: Pattern for a year
        year_month: Pattern for a year and month
        month_day: Pattern for a month and day
    """

    local_date: str = "yyyy-MM-dd"
    local_time: str = "HH:mm:ss"
    local_date_time: str = "yyyy-MM-dd'T'HH:mm:ss"
    year: str = "yyyy"
    year_month: str = "yyyy-MM"
    month_day: str = "MM-dd"

    def __post_init__(self) -> None:
        for name in self.names():
            pattern = getattr(self, name)
            if not isinstance(pattern, str):
                raise ValueError(f"Pattern '{name}' must be a string, got {type(pattern).__name__}")
            try:
                TemporalFormatter.of_pattern(pattern)
            except ValueError as e:
                raise ValueError(f"Invalid pattern '{name}': {e}") from e

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Names of the configurable patterns."""
        return tuple(f.name for f in fields(cls))

    def formatter(self, name: str) -> TemporalFormatter:
        """Strict formatter for a configured pattern.

        Raises:
            KeyError: If name is not a configurable pattern
        """
        if name not in self.names():
            raise KeyError(name)
        return TemporalFormatter.of_pattern(getattr(self, name))

    def with_overrides(self, overrides: dict[str, Any]) -> PatternConfig:
        """Copy with some patterns replaced.

        Raises:
            ValueError: If an override names an unknown pattern or is invalid
        """
        unknown = sorted(set(overrides) - set(self.names()))
        if unknown:
            raise ValueError(f"Unknown pattern names: {', '.join(unknown)}")
        if overrides:
            logger.debug("Overriding patterns: %s", overrides)
        return replace(self, **overrides)

    @classmethod
    def from_env(cls) -> PatternConfig:
        """Load patterns from CHRONOEXT_PATTERN_<NAME> environment variables."""
        overrides = {}
        for name in cls.names():
            value = os.getenv(PATTERN_ENV_PREFIX + name.upper())
            if value is not None:
                overrides[name] = value
        return cls().with_overrides(overrides)

    @classmethod
    def from_yaml(cls, path: str | Path) -> PatternConfig:
        """Load patterns from the ``pattern`` mapping of a YAML file.

        An empty file or a file without a ``pattern`` mapping gives the
        defaults.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the content is not a mapping or a pattern is invalid
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        patterns = data.get("pattern") or {}
        if not isinstance(patterns, dict):
            raise ValueError(f"'pattern' in {path} must be a mapping")
        return cls().with_overrides(patterns)


@lru_cache(maxsize=1)
def load_config() -> PatternConfig:
    """Load the pattern configuration once.

    Reads the YAML file named by CHRONOEXT_CONFIG_FILE when set, otherwise
    the environment variables.
    """
    path = os.getenv(CONFIG_FILE_ENV)
    if path:
        logger.debug("Loading pattern configuration from %s", path)
        return PatternConfig.from_yaml(path)
    logger.debug("Loading pattern configuration from environment")
    return PatternConfig.from_env()


def reset_config() -> None:
    """Forget the loaded configuration; the next load_config() reads it again."""
    load_config.cache_clear()
