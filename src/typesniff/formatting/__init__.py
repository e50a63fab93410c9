"""Dataset formatting according to an inferred schema."""

from typesniff.formatting.dataset import data_format

__all__ = ["data_format"]
