"""Column descriptor models.

Descriptors are immutable. Attribute names are snake_case; serialize with
``model_dump(by_alias=True)`` for camelCase keys (``topK``, ``isPrimaryKey``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from typesniff.core.models.base import BaseType


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class NumericStats(_Frozen):
    """Summary statistics of a Number column."""

    min: float
    max: float
    mean: float
    stdev: float


class TextStats(_Frozen):
    """Length statistics of a String column."""

    min_len: int
    max_len: int
    avg_len: float


class ColumnDescriptor(_Frozen):
    """Inferred type, format and statistics of one column."""

    name: str
    source_name: str | None = None
    type: BaseType
    format: str | None = None
    repeating: bool | None = None
    sequential: bool | None = None

    # Dominance of the most frequent format label, and the best-guess label
    score: float | None = None
    probably: str | None = None
    tally: dict[str, int] = Field(default_factory=dict)

    completeness: float = 0.0
    distinct_count: int = 0
    cardinality: float = 0.0
    top_k: list[tuple[str, int]] = Field(default_factory=list)
    num_stats: NumericStats | None = None
    text_stats: TextStats | None = None
    uniqueness_ratio: float = 0.0
    is_unique: bool = False
    is_primary_key: bool = False

    @property
    def non_empty_count(self) -> int:
        """Number of non-empty observations."""
        return sum(self.tally.values())

    def to_dict(self) -> dict[str, object]:
        """camelCase mapping without unset optional keys."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
