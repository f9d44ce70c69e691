"""Maskers that hide non-prose regions of a document from the spellchecker."""

from __future__ import annotations

from ..utils.file_io import DocumentFormat
from .base import MASK_CHAR, MaskedView, Masker, blank
from .markdown import MarkdownMasker
from .plain import PlainMasker

__all__ = [
    "MASK_CHAR",
    "MaskedView",
    "Masker",
    "MarkdownMasker",
    "PlainMasker",
    "blank",
    "get_masker",
]


def get_masker(fmt: DocumentFormat, *, mask_frontmatter: bool = False) -> Masker:
    """Return the masker responsible for documents of ``fmt``."""

    if fmt is DocumentFormat.MARKDOWN:
        return MarkdownMasker(mask_frontmatter=mask_frontmatter)
    return PlainMasker()
