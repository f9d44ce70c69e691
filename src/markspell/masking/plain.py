"""Identity masker used for every non-Markdown document."""

from __future__ import annotations

from .base import MaskedView

__all__ = ["PlainMasker"]


class PlainMasker:
    """Leave the document untouched so all of it is spellchecked."""

    def mask(self, document: str) -> MaskedView:
        return MaskedView.identity(document)
