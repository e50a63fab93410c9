"""Core infrastructure: configuration, logging and shared models."""

from typesniff.core.config import Settings, get_settings
from typesniff.core.models import BaseType, Format, Result, ValueClass

__all__ = [
    "BaseType",
    "Format",
    "Result",
    "Settings",
    "ValueClass",
    "get_settings",
]
