"""The capability the spellcheck pipeline needs from a misspelling detector."""

from __future__ import annotations

from typing import Any, Awaitable, Mapping, Protocol, Sequence, Union, runtime_checkable

from ..core.ranges import TextRange

__all__ = ["Detector", "RangeLike", "SpellingRanges"]

RangeLike = Union[TextRange, Mapping[str, int], Sequence[int], Any]
SpellingRanges = Sequence[RangeLike]


@runtime_checkable
class Detector(Protocol):
    """Flags misspelled words in a text blob and proposes corrections.

    ``check_spelling`` may be a coroutine function or a plain function
    returning the ranges directly; the assembler awaits the result when it is
    awaitable. Ranges are half-open offsets into ``text`` in any order.
    ``suggest`` is synchronous and may return ``None`` for "no suggestions".
    """

    def check_spelling(
        self, text: str
    ) -> Awaitable[SpellingRanges] | SpellingRanges:  # pragma: no cover - Protocol placeholder
        ...

    def suggest(self, word: str) -> Sequence[str] | None:  # pragma: no cover - Protocol placeholder
        ...
