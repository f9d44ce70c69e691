"""Core domain types shared by the masking and assembly layers."""

from .ranges import TextRange, merge_ranges

__all__ = ["TextRange", "merge_ranges"]
