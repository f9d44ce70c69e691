"""Misspelling detectors consumed by the spellcheck pipeline."""

from .base import Detector, RangeLike, SpellingRanges
from .pyspell import PySpellCheckerDetector

__all__ = ["Detector", "RangeLike", "SpellingRanges", "PySpellCheckerDetector"]
