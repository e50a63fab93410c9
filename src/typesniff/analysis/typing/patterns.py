"""Pattern detection for string sub-formats.

This module provides value-based pattern matching for the string stage of
value classification. Patterns are defined in config/patterns/default.yaml
and evaluated in file order, first match wins.

IMPORTANT: Classification is based ONLY on value patterns, NOT column names.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

import yaml

from typesniff.core.config import get_settings
from typesniff.core.models.base import BaseType


@dataclass
class Pattern:
    """A single pattern definition for value matching.

    Patterns match against actual cell values (not column names).
    """

    name: str
    pattern: str
    format: str
    inferred_type: BaseType = BaseType.STRING
    case_sensitive: bool = True
    examples: list[str] | None = None
    json_schema: dict[str, Any] | None = None  # Keywords for JSON Schema rendering

    # Compiled regex (set in __post_init__)
    _regex: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Compile regex pattern with ASCII-only character classes."""
        flags = re.ASCII if self.case_sensitive else re.ASCII | re.IGNORECASE
        self._regex = re.compile(self.pattern, flags)

    def matches(self, value: str) -> bool:
        """Check if value matches this pattern.

        Args:
            value: String value to check

        Returns:
            True if pattern matches
        """
        if not value:
            return False
        return self._regex.match(value) is not None


class PatternConfig:
    """String sub-format configuration.

    Loads patterns from YAML configuration and provides ordered matching.
    """

    def __init__(self, config_dict: dict[str, object]):
        self._config = config_dict
        self.patterns: list[Pattern] = []
        self._load_patterns()

    def _load_patterns(self) -> None:
        """Load all value patterns from configuration, preserving file order."""
        patterns_list = cast(list[dict[str, Any]], self._config.get("string_patterns") or [])
        for pattern_dict in patterns_list:
            try:
                pattern = Pattern(
                    name=pattern_dict["name"],
                    pattern=pattern_dict["pattern"],
                    format=pattern_dict["format"],
                    inferred_type=BaseType(pattern_dict.get("inferred_type", "String")),
                    case_sensitive=pattern_dict.get("case_sensitive", True),
                    examples=pattern_dict.get("examples"),
                    json_schema=pattern_dict.get("json_schema"),
                )
            except (KeyError, ValueError):
                # Skip invalid patterns
                continue
            self.patterns.append(pattern)

    def first_match(self, value: str) -> Pattern | None:
        """Return the first pattern matching a value, if any."""
        for pattern in self.patterns:
            if pattern.matches(value):
                return pattern
        return None

    def json_schema_for(self, format_label: str | None) -> dict[str, Any]:
        """JSON Schema keywords declared for a format label."""
        for pattern in self.patterns:
            if pattern.format == format_label and pattern.json_schema:
                return dict(pattern.json_schema)
        return {}


def load_pattern_config(config_path: Path | None = None) -> PatternConfig:
    """Load pattern configuration from YAML.

    Args:
        config_path: Optional path to config file. If None, uses default from settings.

    Returns:
        PatternConfig instance
    """
    if config_path is None:
        settings = get_settings()
        config_path = settings.config_path / "patterns" / "default.yaml"

    with open(config_path, encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    return PatternConfig(config_dict)


@lru_cache
def default_pattern_config() -> PatternConfig:
    """Pattern configuration from the configured path, loaded once per process."""
    return load_pattern_config()
