"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (typing, temporal, statistics, schema).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value


# === Enums ===


class BaseType(str, Enum):
    """Base type of a column or a single value."""

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    DATE = "Date"


class Format:
    """Format labels shared by the classifier, resolver and renderers."""

    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    FLOAT = "Float"
    CURRENCY = "Currency"
    PERCENTAGE = "Percentage"
    FINANCIAL_YEAR = "Financial year"
    URL = "URL"
    EMAIL = "Email"
    IP_ADDRESS = "IP Address"
    PHONE_NUMBER = "Phone Number"
    COLOR = "Color"
    OBJECT = "Object"
    JSON = "JSON"
    TEXT = "Text"
    LIST = "List"
    YEAR = "%Y"
    MIXED = "mixed"

    NUMERIC = frozenset({INTEGER, FLOAT, CURRENCY, PERCENTAGE})


# === Value classification ===


@dataclass(frozen=True)
class ValueClass:
    """Classification of a single non-empty value."""

    type: BaseType
    format: str

    @property
    def label(self) -> str:
        """Label used when tallying observations."""
        return self.format or self.type.value
