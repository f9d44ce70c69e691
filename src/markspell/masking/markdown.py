"""Markdown masking: blank out code, link targets and HTML before spellchecking.

Rules run in precedence order and each one sees the output of the previous
ones, so anything already blanked is never re-examined:

1. fenced code blocks
2. indented code blocks
3. inline code spans
4. link and image targets (plus reference definitions and labels)
5. raw HTML tags

Code blocks are the union of what ``markdown-it-py``'s CommonMark parser
reports and a looser line scan, so syntax the parser rejects still gets
masked. The inline rules are tolerant scanners over the partially masked
text. An optional front-matter rule runs before everything else.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional

from markdown_it import MarkdownIt

from ..core.ranges import TextRange, merge_ranges
from .base import MaskedView, blank
from .html import find_html_spans

__all__ = [
    "MarkdownMasker",
    "find_code_block_spans",
    "find_inline_code_spans",
    "find_link_spans",
    "find_frontmatter_span",
]

LOGGER = logging.getLogger(__name__)

Rule = Callable[[str], Iterable[TextRange]]

_NEWLINE_PATTERN = re.compile(r"\r\n?|\n")
_BACKTICK_RUN = re.compile(r"`+")
_FENCE_LINE = re.compile(r"[ \t]*```")
_CODE_INDENT = "    "
_BLANK_LINE = re.compile(r"[ \t]*(?:\r\n?|\n|$)")
_REFERENCE_DEFINITION = re.compile(
    r"^ {0,3}\[(?:[^\]\\\r\n]|\\.)+\]:[ \t]*(?:<[^>\r\n]*>|\S+)",
    re.MULTILINE,
)
_FRONTMATTER_FENCES = ("---", "+++")
_CODE_TOKENS = frozenset({"fence", "code_block"})

_PARSER: Optional[MarkdownIt] = None


def _build_parser() -> MarkdownIt:
    global _PARSER
    if _PARSER is None:
        # html=True keeps raw HTML blocks from being read as indented code.
        _PARSER = MarkdownIt("commonmark", {"html": True})
    return _PARSER


class MarkdownMasker:
    """Produce a :class:`MaskedView` with Markdown's non-prose regions blanked."""

    def __init__(self, *, mask_frontmatter: bool = False) -> None:
        rules: list[tuple[str, Rule]] = []
        if mask_frontmatter:
            rules.append(("frontmatter", _frontmatter_rule))
        rules.extend(
            [
                ("code_block", find_code_block_spans),
                ("inline_code", find_inline_code_spans),
                ("link", find_link_spans),
                ("html", find_html_spans),
            ]
        )
        self._rules: tuple[tuple[str, Rule], ...] = tuple(rules)

    @property
    def rule_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._rules)

    def mask(self, document: str) -> MaskedView:
        text = document
        masked: list[TextRange] = []
        for name, rule in self._rules:
            spans = [span for span in rule(text) if not span.is_empty]
            if not spans:
                continue
            LOGGER.debug("Markdown rule %s masked %d span(s)", name, len(spans))
            text = blank(text, spans)
            masked.extend(spans)
        return MaskedView(text, tuple(masked))


# ---------------------------------------------------------------------------
# Block rules
# ---------------------------------------------------------------------------
def find_code_block_spans(text: str) -> list[TextRange]:
    """Return the line spans of fenced and indented code blocks.

    Spans reported by the CommonMark parser are merged with those of
    :func:`_scan_code_lines`, which also catches fences indented under a
    paragraph or list item, tab-indented fences, and fences whose info string
    the parser rejects. Unclosed fences run to the end of the document.
    """

    if not text:
        return []
    starts = _line_starts(text)
    lines = [_line_text(text, starts, number) for number in range(len(starts))]
    blocks = _scan_code_lines(lines)
    openers = {first for first, _ in blocks}
    for token in _build_parser().parse(text):
        if token.type not in _CODE_TOKENS or not token.map:
            continue
        first, last = token.map
        # A backtick fence the scan saw as a closing line would otherwise run to the end.
        if token.type == "fence" and _FENCE_LINE.match(lines[first]) and first not in openers:
            continue
        blocks.append((first, last))
    return merge_ranges(_line_span(starts, len(text), first, last) for first, last in blocks)


def _scan_code_lines(lines: list[str]) -> list[tuple[int, int]]:
    """Return ``(first, last)`` line numbers (last exclusive) of code blocks.

    A line whose first non-blank content is three or more backticks opens a
    fence that closes at the next such line. A line indented four spaces
    right after a blank line opens an indented block that runs while lines
    keep the indent.
    """

    blocks: list[tuple[int, int]] = []
    count = len(lines)
    number = 0
    previous_blank = True
    while number < count:
        line = lines[number]
        if _FENCE_LINE.match(line):
            close = next(
                (candidate for candidate in range(number + 1, count) if _FENCE_LINE.match(lines[candidate])),
                None,
            )
            last = count if close is None else close + 1
        elif previous_blank and line.startswith(_CODE_INDENT) and line.strip():
            last = number + 1
            while last < count and lines[last].startswith(_CODE_INDENT) and not _FENCE_LINE.match(lines[last]):
                last += 1
        else:
            previous_blank = not line.strip()
            number += 1
            continue
        blocks.append((number, last))
        number = last
        previous_blank = False
    return blocks


def find_frontmatter_span(text: str) -> TextRange | None:
    """Return the span of a leading ``---``/``+++`` front-matter block, if any."""

    offset = 1 if text.startswith("\ufeff") else 0
    starts = _line_starts(text)
    first_line = _line_text(text, starts, 0)[offset:]
    fence = first_line.strip()
    if fence not in _FRONTMATTER_FENCES or not first_line.startswith(fence):
        return None
    for number in range(1, len(starts)):
        if _line_text(text, starts, number).strip() == fence:
            return _line_span(starts, len(text), 0, number + 1)
    return None


def _frontmatter_rule(text: str) -> list[TextRange]:
    span = find_frontmatter_span(text)
    return [span] if span is not None else []


def _line_starts(text: str) -> list[int]:
    return [0] + [match.end() for match in _NEWLINE_PATTERN.finditer(text)]


def _line_span(starts: list[int], length: int, first: int, last: int) -> TextRange:
    start = starts[first] if first < len(starts) else length
    end = starts[last] if last < len(starts) else length
    return TextRange(start, end)


def _line_text(text: str, starts: list[int], number: int) -> str:
    start = starts[number]
    end = starts[number + 1] if number + 1 < len(starts) else len(text)
    return text[start:end].rstrip("\r\n")


# ---------------------------------------------------------------------------
# Inline rules
# ---------------------------------------------------------------------------
def find_inline_code_spans(text: str) -> list[TextRange]:
    """Return spans delimited by matching backtick runs on the same line.

    A run of N backticks closes at the next run of exactly N backticks; a run
    without a partner is left alone.
    """

    spans: list[TextRange] = []
    starts = _line_starts(text)
    for number, line_start in enumerate(starts):
        line = _line_text(text, starts, number)
        if "`" not in line:
            continue
        runs = list(_BACKTICK_RUN.finditer(line))
        index = 0
        while index < len(runs):
            opener = runs[index]
            if _is_escaped(line, opener.start()):
                index += 1
                continue
            width = len(opener.group(0))
            partner = next(
                (
                    candidate
                    for candidate in range(index + 1, len(runs))
                    if len(runs[candidate].group(0)) == width
                ),
                None,
            )
            if partner is None:
                index += 1
                continue
            closer = runs[partner]
            spans.append(TextRange(line_start + opener.start(), line_start + closer.end()))
            index = partner + 1
    return spans


def find_link_spans(text: str) -> list[TextRange]:
    """Return the delimiter and target spans of links and images.

    For ``[TEXT](URL)`` and ``![ALT](URL)`` the ``!``, ``[`` and ``]``
    delimiters and the whole ``(URL)`` group are reported; the text itself is
    not. Images nested inside links are handled. Reference definitions
    (``[label]: url``) and the ``[label]`` part of ``[text][label]`` links are
    reported too.
    """

    definitions = [
        TextRange(match.start(), match.end()) for match in _REFERENCE_DEFINITION.finditer(text)
    ]
    working = blank(text, definitions) if definitions else text
    return definitions + _scan_brackets(working)


def _scan_brackets(text: str) -> list[TextRange]:
    spans: list[TextRange] = []
    openers: list[int] = []
    length = len(text)
    index = 0
    while index < length:
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == "\n" or (char == "\r" and text[index + 1 : index + 2] != "\n"):
            # A blank line ends the paragraph; brackets never pair across it.
            if _BLANK_LINE.match(text, index + 1):
                openers.clear()
        elif char == "[":
            openers.append(index)
        elif char == "]" and openers:
            opener = openers.pop()
            following = text[index + 1 : index + 2]
            if following == "(":
                close = _find_closing_paren(text, index + 1)
            elif following == "[":
                close = _find_label_end(text, index + 1)
            else:
                close = None
            if close is not None:
                spans.append(TextRange(_delimiter_start(text, opener), opener + 1))
                spans.append(TextRange(index, close + 1))
                index = close + 1
                continue
        index += 1
    return spans


def _delimiter_start(text: str, opener: int) -> int:
    if opener > 0 and text[opener - 1] == "!" and not _is_escaped(text, opener - 1):
        return opener - 1
    return opener


def _find_closing_paren(text: str, start: int) -> int | None:
    depth = 0
    index = start
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char in "\r\n":
            return None
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return None


def _find_label_end(text: str, start: int) -> int | None:
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char in "\r\n[":
            return None
        if char == "]":
            return index
        index += 1
    return None


def _is_escaped(text: str, index: int) -> bool:
    backslashes = 0
    cursor = index - 1
    while cursor >= 0 and text[cursor] == "\\":
        backslashes += 1
        cursor -= 1
    return backslashes % 2 == 1
