"""Raw HTML recognition for Markdown documents.

Only tag tokens are reported: ``<table>``, ``<td colspan="2">``, ``</td>``,
comments, declarations and processing instructions. Text between ordinary
tags stays eligible for spellchecking. The bodies of raw-text elements
(``script``, ``style``, ``pre``, ``code``) are reported as well since they
never hold prose. An unterminated tag or comment runs to the end of the text.
"""

from __future__ import annotations

import re

from ..core.ranges import TextRange

__all__ = ["RAW_TEXT_ELEMENTS", "find_html_spans"]

RAW_TEXT_ELEMENTS = frozenset({"script", "style", "pre", "code"})
_TAG_START = re.compile(r"<(?:!--|[!?]|/?[A-Za-z])")
_TAG_NAME = re.compile(r"<([A-Za-z][A-Za-z0-9:-]*)")
_QUOTES = "\"'"


def find_html_spans(text: str) -> list[TextRange]:
    """Return the spans of every HTML construct found in ``text``."""

    spans: list[TextRange] = []
    length = len(text)
    position = 0
    while position < length:
        match = _TAG_START.search(text, position)
        if match is None:
            break
        start = match.start()
        token = match.group(0)
        if token == "<!--":
            close = text.find("-->", match.end())
            end = length if close == -1 else close + 3
        elif token in ("<!", "<?"):
            close = text.find(">", match.end())
            end = length if close == -1 else close + 1
        else:
            end = _find_tag_end(text, match.end())
        spans.append(TextRange(start, end))
        position = end

        element = _raw_text_element(text, start, end)
        if element is not None:
            closing = re.compile(rf"</{element}\s*>", re.IGNORECASE).search(text, end)
            stop = length if closing is None else closing.end()
            spans.append(TextRange(end, stop))
            position = stop
    return spans


def _find_tag_end(text: str, index: int) -> int:
    quote: str | None = None
    previous = ""
    for offset in range(index, len(text)):
        char = text[offset]
        if quote is not None:
            if char == quote:
                quote = None
            continue
        if char in _QUOTES and previous == "=":
            quote = char
        elif char == ">":
            return offset + 1
        if not char.isspace():
            previous = char
    return len(text)


def _raw_text_element(text: str, start: int, end: int) -> str | None:
    match = _TAG_NAME.match(text, start)
    if match is None:
        return None
    name = match.group(1).lower()
    if name not in RAW_TEXT_ELEMENTS:
        return None
    if text[start:end].rstrip().endswith("/>"):
        return None
    return name
