"""Core models shared across typesniff modules."""

from typesniff.core.models.base import BaseType, Format, Result, ValueClass

__all__ = [
    "BaseType",
    "Format",
    "Result",
    "ValueClass",
]
