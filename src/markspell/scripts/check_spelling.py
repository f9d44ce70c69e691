"""CLI to spellcheck plain text and Markdown files."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..assembler import Misspelling
from ..detectors.base import Detector
from ..detectors.pyspell import PySpellCheckerDetector
from ..errors import SpellcheckError
from ..services.settings import Settings, SettingsStore
from ..spellcheck import get_misspellings
from ..utils.file_io import read_text
from ..utils.logging import configure_logging

LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.paths and args.text is None:
        parser.print_usage(sys.stderr)
        print("No input provided: pass file paths or --text.", file=sys.stderr)
        return 2

    settings = _load_settings(args)
    if settings.debug_logging or args.log_file is not None:
        configure_logging(logging.DEBUG if settings.debug_logging else logging.INFO, log_file=args.log_file)

    try:
        detector = PySpellCheckerDetector(
            settings.language,
            distance=settings.distance,
            max_suggestions=settings.max_suggestions,
        )
        documents = _collect_documents(args)
    except SpellcheckError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"Unable to read input: {exc}", file=sys.stderr)
        return 2

    report = asyncio.run(_check_all(documents, detector, settings))

    if args.json:
        payload = {name: [item.to_dict() for item in results] for name, (_, results) in report.items()}
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for name, (text, results) in report.items():
            for item in results:
                print(_format_result(name, text, item))

    found = any(results for _, results in report.values())
    return 1 if found else 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spellcheck text and Markdown files.")
    parser.add_argument("paths", nargs="*", type=Path, help="Files to spellcheck.")
    parser.add_argument("--text", help="Inline text to spellcheck instead of files.")
    parser.add_argument(
        "--file-name",
        default="stdin.txt",
        help="File name used to pick the format of --text (e.g. notes.md).",
    )
    parser.add_argument("--language", help="Dictionary language code.")
    parser.add_argument("--max-suggestions", type=int, help="Maximum suggestions per word.")
    parser.add_argument(
        "--mask-frontmatter",
        action="store_true",
        default=None,
        help="Skip a leading YAML/TOML front-matter block in Markdown files.",
    )
    parser.add_argument("--settings", type=Path, help="Path to a settings JSON file.")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON.")
    parser.add_argument("--debug", action="store_true", help="Log debug records to stderr.")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this rotating file.")
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "language": args.language,
        "max_suggestions": args.max_suggestions,
        "mask_frontmatter": args.mask_frontmatter,
        "debug_logging": True if args.debug else None,
    }
    return SettingsStore(args.settings).load(overrides=overrides)


def _collect_documents(args: argparse.Namespace) -> list[tuple[str, str]]:
    if args.text is not None:
        return [(args.file_name, args.text)]
    return [(str(path), read_text(path)) for path in args.paths]


async def _check_all(
    documents: Sequence[tuple[str, str]],
    detector: Detector,
    settings: Settings,
) -> dict[str, tuple[str, list[Misspelling]]]:
    report: dict[str, tuple[str, list[Misspelling]]] = {}
    for name, text in documents:
        results = await get_misspellings(text, name, detector=detector, settings=settings)
        LOGGER.debug("%s: %d misspelling(s)", name, len(results))
        report[name] = (text, results)
    return report


def _format_result(name: str, text: str, item: Misspelling) -> str:
    line, column = _position(text, item.index.start)
    suggestions = ", ".join(item.suggestions) if item.suggestions else "no suggestions"
    return f"{name}:{line}:{column}: {item.misspelling} -> {suggestions}"


def _position(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
