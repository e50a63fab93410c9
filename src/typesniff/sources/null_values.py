"""Null marker configuration loader."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from typesniff.core.config import get_settings


class NullValueConfig:
    """Null marker configuration for inference."""

    def __init__(self, config_dict: dict[str, Any]):
        self._config = config_dict

    def get_null_strings(self, include_placeholders: bool = True) -> list[str]:
        """Get list of strings to treat as missing.

        Args:
            include_placeholders: Whether to include placeholder nulls (-, --, etc.)

        Returns:
            List of null string representations
        """
        null_strings = []

        for item in self._config.get("standard_nulls", []):
            null_strings.append(item["value"])

        for item in self._config.get("spreadsheet_nulls", []):
            null_strings.append(item["value"])

        if include_placeholders:
            for item in self._config.get("placeholder_nulls", []):
                null_strings.append(item["value"])

        for item in self._config.get("missing_indicators", []):
            null_strings.append(item["value"])

        return null_strings

    def should_trim_whitespace(self) -> bool:
        """Check if whitespace should be trimmed before null checking."""
        result = self._config.get("whitespace_rules", {}).get("trim_before_check", True)
        return bool(result)

    def treat_whitespace_as_null(self) -> bool:
        """Check if whitespace-only strings should be treated as missing."""
        result = self._config.get("whitespace_rules", {}).get("treat_whitespace_only_as_null", True)
        return bool(result)

    def matcher(self) -> "NullMarkerMatcher":
        """Build a matcher from this configuration."""
        return NullMarkerMatcher(
            self.get_null_strings(),
            trim=self.should_trim_whitespace(),
            whitespace_is_null=self.treat_whitespace_as_null(),
        )


class NullMarkerMatcher:
    """Predicate deciding whether a raw value is missing.

    None and "" are always missing. Other strings are missing when they equal
    one of the markers (after trimming, when enabled).
    """

    def __init__(self, markers: Iterable[str], trim: bool = True, whitespace_is_null: bool = True):
        self.markers = frozenset(markers)
        self.trim = trim
        self.whitespace_is_null = whitespace_is_null

    def __call__(self, value: Any) -> bool:
        if value is None:
            return True
        if not isinstance(value, str):
            return False
        if value == "":
            return True
        if self.whitespace_is_null and not value.strip():
            return True
        text = value.strip() if self.trim else value
        return text in self.markers


def load_null_value_config(config_path: Path | None = None) -> NullValueConfig:
    """Load null marker configuration from YAML.

    Args:
        config_path: Optional path to config file. If None, uses default from settings.

    Returns:
        NullValueConfig instance
    """
    if config_path is None:
        settings = get_settings()
        config_path = settings.config_path / "null_values.yaml"

    with open(config_path, encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    return NullValueConfig(config_dict)
