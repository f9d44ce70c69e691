"""File helpers: format detection by file name and encoding-aware reads."""

from __future__ import annotations

import codecs
import locale
from enum import Enum
from pathlib import Path, PurePath
from typing import Iterable

__all__ = [
    "DocumentFormat",
    "DEFAULT_MARKDOWN_EXTENSIONS",
    "detect_format",
    "file_extension",
    "read_text",
]

_BOM_MAP: dict[bytes, str] = {
    codecs.BOM_UTF8: "utf-8-sig",
    codecs.BOM_UTF16_LE: "utf-16-le",
    codecs.BOM_UTF16_BE: "utf-16-be",
    codecs.BOM_UTF32_LE: "utf-32-le",
    codecs.BOM_UTF32_BE: "utf-32-be",
}
DEFAULT_MARKDOWN_EXTENSIONS: tuple[str, ...] = ("md",)


class DocumentFormat(Enum):
    """Document formats the spellchecker knows how to mask."""

    MARKDOWN = "markdown"
    PLAIN = "plain"


def file_extension(file_name: str) -> str:
    """Return the lower-cased text after the last ``.`` of the final path component."""

    name = PurePath(file_name).name if file_name else ""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


def detect_format(
    file_name: str,
    *,
    markdown_extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS,
) -> DocumentFormat:
    """Infer the document format from ``file_name``'s extension."""

    extension = file_extension(file_name)
    allowed = {item.lower().lstrip(".") for item in markdown_extensions}
    if extension and extension in allowed:
        return DocumentFormat.MARKDOWN
    return DocumentFormat.PLAIN


def read_text(path: Path | str, *, encoding: str | None = None, errors: str = "strict") -> str:
    """Read a text file with BOM/encoding detection.

    Newlines are left untouched so offsets reported against the returned text
    line up with the file on disk.
    """

    target = Path(path)
    raw = target.read_bytes()
    detected_encoding = encoding or _detect_encoding(raw)
    text = raw.decode(detected_encoding, errors=errors)
    return _strip_bom(text)


def _detect_encoding(raw: bytes) -> str:
    for bom, encoding in _BOM_MAP.items():
        if raw.startswith(bom):
            return encoding

    preferred = locale.getpreferredencoding(False) or "utf-8"
    seen: set[str] = set()
    for candidate in ("utf-8", preferred, "latin-1"):
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        try:
            raw.decode(candidate)
            return candidate
        except UnicodeDecodeError:
            continue
    return "utf-8"


def _strip_bom(text: str) -> str:
    return text[1:] if text.startswith("\ufeff") else text
