"""Dictionary-backed detector built on ``pyspellchecker``."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import List

from spellchecker import SpellChecker

from ..core.ranges import TextRange
from ..errors import DetectorUnavailableError

__all__ = ["PySpellCheckerDetector"]

LOGGER = logging.getLogger(__name__)

# Letters with optional internal apostrophes, never glued to digits or underscores.
_WORD_PATTERN = re.compile(r"(?<!\w)[^\W\d_]+(?:['’][^\W\d_]+)*(?!\w)")
_MIN_WORD_LENGTH = 2


class PySpellCheckerDetector:
    """Detector that flags words missing from a ``pyspellchecker`` dictionary.

    - ``check_spelling(text)`` is a coroutine; the dictionary pass runs in a
      worker thread.
    - ``suggest(word)`` returns the most frequent candidates first, with the
      library's preferred correction at the head, in the word's casing.
    """

    def __init__(self, language: str = "en", *, distance: int = 2, max_suggestions: int = 5) -> None:
        try:
            self._spell = SpellChecker(language=language, distance=distance)
        except (ValueError, OSError) as exc:
            raise DetectorUnavailableError(
                message=f"Unable to load a '{language}' dictionary: {exc}",
                language=language,
            ) from exc
        self.language = language
        self.max_suggestions = max(0, int(max_suggestions))

    async def check_spelling(self, text: str) -> list[TextRange]:
        return await asyncio.to_thread(self.find_misspellings, text)

    def find_misspellings(self, text: str) -> list[TextRange]:
        """Return the ranges of every unknown word in ``text``."""

        tokens = [match for match in _WORD_PATTERN.finditer(text) if self._is_candidate(match.group(0))]
        if not tokens:
            return []
        unknown = self._spell.unknown(_normalize(match.group(0)) for match in tokens)
        ranges = [
            TextRange(match.start(), match.end())
            for match in tokens
            if _normalize(match.group(0)) in unknown
        ]
        LOGGER.debug("Dictionary pass flagged %d of %d word(s)", len(ranges), len(tokens))
        return ranges

    def suggest(self, word: str) -> List[str]:
        if self.max_suggestions == 0:
            return []
        low = _normalize(word)
        candidates = self._spell.candidates(low) or set()
        candidates.discard(low)
        if not candidates:
            return []
        correction = self._spell.correction(low)
        ordered = sorted(candidates, key=lambda item: (-self._spell.word_usage_frequency(item), item))
        if correction in candidates:
            ordered.remove(correction)
            ordered.insert(0, correction)
        return [_match_case(item, word) for item in ordered[: self.max_suggestions]]

    @staticmethod
    def _is_candidate(token: str) -> bool:
        # Skip single letters and ALL-CAPS acronyms.
        if len(token) < _MIN_WORD_LENGTH:
            return False
        return not token.isupper()


def _normalize(word: str) -> str:
    return word.replace("’", "'").lower()


def _match_case(suggestion: str, original: str) -> str:
    if original.istitle():
        return suggestion.title()
    if original.isupper():
        return suggestion.upper()
    return suggestion
