"""Value classification and normalization."""

from typesniff.analysis.typing.classifier import ValueClassifier, classify_value
from typesniff.analysis.typing.normalize import normalize_boolean, normalize_number
from typesniff.analysis.typing.patterns import Pattern, PatternConfig, load_pattern_config

__all__ = [
    "Pattern",
    "PatternConfig",
    "ValueClassifier",
    "classify_value",
    "load_pattern_config",
    "normalize_boolean",
    "normalize_number",
]
