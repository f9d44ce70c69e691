"""Public entry points: find misspellings in a document named ``file_name``."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Awaitable

from .assembler import Misspelling, assemble
from .detectors.base import Detector
from .detectors.pyspell import PySpellCheckerDetector
from .errors import InvalidArgumentError
from .masking import MaskedView, get_masker
from .services.settings import Settings
from .utils.file_io import detect_format

__all__ = [
    "get_misspellings",
    "get_misspellings_sync",
    "mask_document",
    "default_detector",
    "reset_default_detector",
]

LOGGER = logging.getLogger(__name__)

_DEFAULT_DETECTORS: dict[tuple[str, int, int], Detector] = {}
_DEFAULT_DETECTOR_LOCK = threading.Lock()


def default_detector(settings: Settings | None = None) -> Detector:
    """Return the shared dictionary detector for ``settings``.

    One detector is built lazily per ``(language, distance, max_suggestions)``
    combination and reused by every later call with the same values.
    """

    resolved = settings or Settings()
    key = (resolved.language, resolved.distance, resolved.max_suggestions)
    with _DEFAULT_DETECTOR_LOCK:
        detector = _DEFAULT_DETECTORS.get(key)
        if detector is None:
            detector = PySpellCheckerDetector(
                resolved.language,
                distance=resolved.distance,
                max_suggestions=resolved.max_suggestions,
            )
            _DEFAULT_DETECTORS[key] = detector
            LOGGER.debug("Built default detector for language %s", resolved.language)
        return detector


def reset_default_detector() -> None:
    with _DEFAULT_DETECTOR_LOCK:
        _DEFAULT_DETECTORS.clear()


def mask_document(document: str, file_name: str, *, settings: Settings | None = None) -> MaskedView:
    """Return the view of ``document`` the detector will see."""

    _require_str("document", document)
    _require_str("file_name", file_name)
    resolved = settings or Settings()
    fmt = detect_format(file_name, markdown_extensions=resolved.markdown_extensions)
    LOGGER.debug("Dispatching %r as %s", file_name, fmt.value)
    masker = get_masker(fmt, mask_frontmatter=resolved.mask_frontmatter)
    return masker.mask(document)


def get_misspellings(
    document: str,
    file_name: str,
    *,
    detector: Detector | None = None,
    settings: Settings | None = None,
) -> Awaitable[list[Misspelling]]:
    """Return an awaitable resolving to the misspellings found in ``document``.

    Arguments are validated and the document is masked before this function
    returns, so bad input raises :class:`InvalidArgumentError` immediately
    rather than when the result is awaited. The only suspension point is the
    detector's ``check_spelling`` call.
    """

    view = mask_document(document, file_name, settings=settings)
    resolved_detector = detector if detector is not None else default_detector(settings)
    return assemble(document, view, resolved_detector)


def get_misspellings_sync(
    document: str,
    file_name: str,
    *,
    detector: Detector | None = None,
    settings: Settings | None = None,
) -> list[Misspelling]:
    """Blocking wrapper around :func:`get_misspellings` for callers without a loop."""

    return asyncio.run(
        _collect(get_misspellings(document, file_name, detector=detector, settings=settings))
    )


async def _collect(pending: Awaitable[list[Misspelling]]) -> list[Misspelling]:
    return await pending


def _require_str(argument: str, value: object) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError.expected_str(argument, value)
