"""Shared test helpers and stub detectors.

Import from here instead of duplicating these classes in individual test files.
"""

from __future__ import annotations

import re
from typing import Mapping, Sequence


def ranges_for_words(document: str, words: Sequence[str]) -> list[dict[str, int]]:
    """Return ``{"start", "end"}`` for the first occurrence of each word in ``document``."""

    ranges = []
    for word in words:
        start = document.index(word)
        ranges.append({"start": start, "end": start + len(word)})
    return ranges


class StaticDetector:
    """Detector that always reports the same ranges, whatever text it is given.

    Mirrors a dictionary that flags words by position in the original
    document, so masking has to be honoured by the assembler.
    """

    def __init__(self, ranges: Sequence[object], corrections: Mapping[str, Sequence[str] | None] | None = None):
        self.ranges = list(ranges)
        self.corrections = dict(corrections or {})
        self.checked: list[str] = []
        self.suggested: list[str] = []

    async def check_spelling(self, text: str) -> list[object]:
        self.checked.append(text)
        return list(self.ranges)

    def suggest(self, word: str):
        self.suggested.append(word)
        return self.corrections.get(word)


class WordListDetector:
    """Detector that flags every whole-word occurrence of ``words`` in the text it sees."""

    def __init__(self, words: Sequence[str], corrections: Mapping[str, Sequence[str] | None] | None = None):
        self.words = list(words)
        self.corrections = dict(corrections or {})
        self.checked: list[str] = []

    async def check_spelling(self, text: str) -> list[dict[str, int]]:
        self.checked.append(text)
        found = []
        for word in self.words:
            for match in re.finditer(rf"\b{re.escape(word)}\b", text):
                found.append({"start": match.start(), "end": match.end()})
        return sorted(found, key=lambda item: item["start"])

    def suggest(self, word: str):
        return self.corrections.get(word)


class SyncDetector(WordListDetector):
    """Same as :class:`WordListDetector` but with a blocking ``check_spelling``."""

    def check_spelling(self, text: str) -> list[dict[str, int]]:  # type: ignore[override]
        self.checked.append(text)
        return [
            {"start": match.start(), "end": match.end()}
            for word in self.words
            for match in re.finditer(rf"\b{re.escape(word)}\b", text)
        ]


class FailingDetector:
    """Detector whose spellcheck call always raises ``error``."""

    def __init__(self, error: BaseException):
        self.error = error

    async def check_spelling(self, text: str):
        raise self.error

    def suggest(self, word: str):  # pragma: no cover - never reached
        raise AssertionError("suggest should not be called")
