"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the config directory shipped with the package.

    Looks for a 'config/' directory containing patterns/default.yaml next to
    the package sources. Falls back to relative Path("config") if not found.
    """
    # Start from this file: src/typesniff/core/config.py
    # Package dir is 2 levels up: config.py -> core/ -> typesniff/
    package_dir = Path(__file__).resolve().parent.parent
    candidate = package_dir / "config"
    if (candidate / "patterns" / "default.yaml").is_file():
        return candidate

    # Fallback: relative path (works when CWD holds a config/ override)
    return Path("config")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: TYPESNIFF_
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPESNIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (value patterns, null markers)",
    )

    # Profiling
    top_k_values: int = Field(
        default=5,
        description="Number of most frequent values reported per column",
    )
    category_label_limit: int = Field(
        default=10,
        description="Distinct string values at which 'Categories: a, b' collapses to 'Categories'",
    )
    list_max_mean_length: int = Field(
        default=30,
        description="Maximum mean item length for a value to count as a delimited list",
    )

    # Year heuristic
    year_min: int = Field(default=1800, description="Lowest integer accepted as a year")
    year_max: int = Field(default=2100, description="Highest integer accepted as a year")

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Level of library log events; the CLI sets its own with -v",
    )
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
