"""Offset-preserving spellchecking for plain text and Markdown documents."""

from .assembler import Misspelling
from .core.ranges import TextRange
from .errors import DetectorUnavailableError, InvalidArgumentError, SpellcheckError
from .masking import MaskedView
from .spellcheck import get_misspellings, get_misspellings_sync, mask_document
from .utils.file_io import DocumentFormat, detect_format

__all__ = [
    "DetectorUnavailableError",
    "DocumentFormat",
    "InvalidArgumentError",
    "MaskedView",
    "Misspelling",
    "SpellcheckError",
    "TextRange",
    "detect_format",
    "get_misspellings",
    "get_misspellings_sync",
    "mask_document",
]
