"""Length-preserving masked views of a document."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Iterable, Protocol, Sequence, runtime_checkable

from ..core.ranges import TextRange, merge_ranges

__all__ = ["MASK_CHAR", "MaskedView", "Masker", "blank"]

MASK_CHAR = " "
_LINE_BREAKS = frozenset("\r\n")


@dataclass(slots=True, frozen=True)
class MaskedView:
    """A document with its non-prose regions blanked out.

    ``text`` always has the same length as the source document, so any
    offset into ``text`` is also an offset into the original. ``masked``
    holds the sorted, non-overlapping spans that were blanked.
    """

    text: str
    masked: tuple[TextRange, ...] = field(default_factory=tuple)
    _starts: tuple[int, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        spans = tuple(merge_ranges(self.masked))
        object.__setattr__(self, "masked", spans)
        object.__setattr__(self, "_starts", tuple(span.start for span in spans))

    def __len__(self) -> int:
        return len(self.text)

    @classmethod
    def identity(cls, document: str) -> MaskedView:
        return cls(document)

    def is_masked(self, span: TextRange) -> bool:
        """Return ``True`` when ``span`` touches any blanked region."""

        # Carets count as touching the character they sit on.
        end = span.start + 1 if span.is_empty else span.end
        index = bisect.bisect_left(self._starts, end)
        return index > 0 and self.masked[index - 1].end > span.start


@runtime_checkable
class Masker(Protocol):
    """Anything that turns a document into a :class:`MaskedView`."""

    def mask(self, document: str) -> MaskedView:  # pragma: no cover - Protocol placeholder
        ...


def blank(text: str, spans: Iterable[TextRange]) -> str:
    """Return ``text`` with every character inside ``spans`` replaced by a space.

    Line breaks are preserved so the line structure of the text survives.
    """

    merged: Sequence[TextRange] = merge_ranges(spans)
    if not merged:
        return text
    chars = list(text)
    for span in merged:
        for offset in range(span.start, min(span.end, len(chars))):
            if chars[offset] not in _LINE_BREAKS:
                chars[offset] = MASK_CHAR
    return "".join(chars)
