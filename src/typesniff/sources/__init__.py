"""Row sources, column key sanitization and null markers."""

from typesniff.sources.keys import KeySanitizer, sanitize_key
from typesniff.sources.loader import load_rows
from typesniff.sources.null_values import NullMarkerMatcher, NullValueConfig, load_null_value_config

__all__ = [
    "KeySanitizer",
    "NullMarkerMatcher",
    "NullValueConfig",
    "load_null_value_config",
    "load_rows",
    "sanitize_key",
]
