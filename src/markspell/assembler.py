"""Turn detector ranges into misspelling records against the original document."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any

from .core.ranges import TextRange
from .detectors.base import Detector
from .masking.base import MaskedView

__all__ = ["Misspelling", "assemble"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Misspelling:
    """A flagged word, where it sits in the document, and what to replace it with."""

    index: TextRange
    misspelling: str
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index.to_dict(),
            "misspelling": self.misspelling,
            "suggestions": list(self.suggestions),
        }


async def assemble(document: str, view: MaskedView, detector: Detector) -> list[Misspelling]:
    """Run ``detector`` over the masked view and report results from ``document``.

    Words are read from the original document, never from the view. Ranges
    that land on a masked region are dropped; everything else is reported in
    the order the detector returned it. Detector errors propagate unchanged.
    """

    flagged = detector.check_spelling(view.text)
    if inspect.isawaitable(flagged):
        flagged = await flagged

    results: list[Misspelling] = []
    dropped = 0
    for raw in flagged or ():
        span = TextRange.from_value(raw).clamp(upper=len(document))
        if view.is_masked(span):
            dropped += 1
            continue
        word = span.slice(document)
        suggestions = detector.suggest(word)
        results.append(Misspelling(index=span, misspelling=word, suggestions=list(suggestions or [])))

    if dropped:
        LOGGER.debug("Dropped %d flagged range(s) inside masked regions", dropped)
    return results
