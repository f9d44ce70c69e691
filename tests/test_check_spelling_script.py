"""Tests for the check_spelling command line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from markspell.errors import DetectorUnavailableError
from markspell.scripts import check_spelling
from tests.helpers import WordListDetector


@pytest.fixture
def fake_detector(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    created: dict[str, object] = {}

    def factory(language: str, *, distance: int, max_suggestions: int) -> WordListDetector:
        created["language"] = language
        created["max_suggestions"] = max_suggestions
        detector = WordListDetector(["wrold", "tset"], {"wrold": ["world"], "tset": []})
        created["detector"] = detector
        return detector

    monkeypatch.setattr(check_spelling, "PySpellCheckerDetector", factory)
    return created


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


def test_main_without_input_returns_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert check_spelling.main([]) == 2
    assert "No input provided" in capsys.readouterr().err


def test_main_reports_misspellings_with_positions(
    tmp_path: Path, settings_path: Path, fake_detector, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hello wrold\nthis is a tset\n", encoding="utf-8")

    exit_code = check_spelling.main([str(target), "--settings", str(settings_path)])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 1
    assert lines == [
        f"{target}:1:7: wrold -> world",
        f"{target}:2:11: tset -> no suggestions",
    ]


def test_main_returns_zero_for_clean_text(settings_path: Path, fake_detector, capsys) -> None:
    exit_code = check_spelling.main(["--text", "all good here", "--settings", str(settings_path)])

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_main_masks_markdown_text_by_file_name(settings_path: Path, fake_detector, capsys) -> None:
    argv = ["--text", "`wrold` and tset", "--file-name", "notes.md", "--settings", str(settings_path)]

    exit_code = check_spelling.main(argv)

    assert exit_code == 1
    assert capsys.readouterr().out.splitlines() == ["notes.md:1:13: tset -> no suggestions"]
    assert fake_detector["detector"].checked == ["        and tset"]


def test_main_emits_json(settings_path: Path, fake_detector, capsys) -> None:
    exit_code = check_spelling.main(["--text", "hello wrold", "--json", "--settings", str(settings_path)])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert payload == {
        "stdin.txt": [
            {"index": {"start": 6, "end": 11}, "misspelling": "wrold", "suggestions": ["world"]},
        ]
    }


def test_main_applies_cli_overrides(settings_path: Path, fake_detector) -> None:
    check_spelling.main(
        ["--text", "ok", "--language", "de", "--max-suggestions", "2", "--settings", str(settings_path)]
    )

    assert fake_detector["language"] == "de"
    assert fake_detector["max_suggestions"] == 2


def test_main_reports_missing_files(tmp_path: Path, settings_path: Path, fake_detector, capsys) -> None:
    exit_code = check_spelling.main([str(tmp_path / "missing.md"), "--settings", str(settings_path)])

    assert exit_code == 2
    assert "Unable to read input" in capsys.readouterr().err


def test_main_reports_unavailable_detector(
    monkeypatch: pytest.MonkeyPatch, settings_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    def factory(language: str, **_: object):
        raise DetectorUnavailableError(message=f"No dictionary for {language!r}", language=language)

    monkeypatch.setattr(check_spelling, "PySpellCheckerDetector", factory)

    exit_code = check_spelling.main(["--text", "hello", "--language", "zz", "--settings", str(settings_path)])

    assert exit_code == 2
    assert "No dictionary for 'zz'" in capsys.readouterr().err


def test_main_debug_logs_to_stderr_without_touching_disk(
    tmp_path: Path, settings_path: Path, fake_detector, capsys, restore_markspell_logging
) -> None:
    exit_code = check_spelling.main(["--text", "ok", "--debug", "--settings", str(settings_path)])

    assert exit_code == 0
    assert "Dispatching 'stdin.txt' as plain" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_main_writes_log_file_when_requested(
    tmp_path: Path, settings_path: Path, fake_detector, restore_markspell_logging
) -> None:
    log_path = tmp_path / "logs" / "run.log"

    check_spelling.main(["--text", "ok", "--debug", "--log-file", str(log_path), "--settings", str(settings_path)])

    for handler in restore_markspell_logging.handlers:
        handler.flush()
    assert "Dispatching" in log_path.read_text(encoding="utf-8")
