"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest

from markspell.services.settings import Settings
from markspell.spellcheck import reset_default_detector


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "MARKSPELL_LANGUAGE",
        "MARKSPELL_DEBUG_LOGGING",
        "MARKSPELL_MASK_FRONTMATTER",
        "MARKSPELL_DISTANCE",
        "MARKSPELL_MAX_SUGGESTIONS",
        "MARKSPELL_MARKDOWN_EXTENSIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_default_detector()
    yield
    reset_default_detector()


@pytest.fixture
def restore_markspell_logging():
    logger = logging.getLogger("markspell")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved_level)
