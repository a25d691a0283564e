"""
Name: PRD Extractor Command Line

Responsibilities:
  - Extract plain text from a local document (`text`)
  - Show the detected phases of a document (`phases`)
  - Run the extract-PRD use case against a local storage root (`generate`)

Exit codes:
  0 success, 1 extraction/use-case error, 2 usage error (argparse)
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from .application.usecases import ExtractPrdTestCasesInput
from .container import (
    get_document_storage,
    get_document_text_extractor,
    get_extract_prd_test_cases_use_case,
    get_phase_detector,
)
from .crosscutting.logger import setup_logger
from .infrastructure.parsers import ParserError
from .infrastructure.storage import StorageError

EXIT_OK = 0
EXIT_ERROR = 1


def _read_document(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc.strerror or exc}") from exc


def _extract(path: str) -> str:
    return get_document_text_extractor().extract_text(_read_document(path), path)


def _cmd_text(args: argparse.Namespace) -> int:
    sys.stdout.write(_extract(args.file))
    sys.stdout.write("\n")
    return EXIT_OK


def _cmd_phases(args: argparse.Namespace) -> int:
    phases = get_phase_detector().detect(_extract(args.file))
    if args.names_only:
        for phase in phases:
            print(phase.name)
    else:
        print(json.dumps([p.to_dict() for p in phases], ensure_ascii=False, indent=2))
    return EXIT_OK


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        storage = get_document_storage(args.root)
    except StorageError as exc:
        raise SystemExit(str(exc)) from exc

    use_case = get_extract_prd_test_cases_use_case(storage=storage)
    result = use_case.execute(
        ExtractPrdTestCasesInput(
            storage_path=args.path,
            repo_id=args.repo_id,
            phase=args.phase,
            user_email=args.user_email,
        )
    )
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return EXIT_ERROR if result.error else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prd-extractor",
        description="Extract text and phases from PRD documents and draft test cases.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    text = sub.add_parser("text", help="Print the plain text of a document")
    text.add_argument("file", help="Path to a .pdf/.docx/.doc/.xlsx/.xls/.csv/text file")
    text.set_defaults(handler=_cmd_text)

    phases = sub.add_parser("phases", help="Print the detected phases as JSON")
    phases.add_argument("file", help="Path to the document")
    phases.add_argument(
        "--names-only",
        action="store_true",
        help="Print only phase names, one per line",
    )
    phases.set_defaults(handler=_cmd_phases)

    generate = sub.add_parser(
        "generate", help="Draft and store test cases for one phase of a stored PRD"
    )
    generate.add_argument("path", help="Storage path relative to --root")
    generate.add_argument("--repo-id", required=True, help="Target test-case repository")
    generate.add_argument(
        "--root", default=None, help="Storage root (default: STORAGE_ROOT setting)"
    )
    generate.add_argument("--phase", default=None, help="Phase name to use")
    generate.add_argument("--user-email", default=None, help="Author of the test cases")
    generate.set_defaults(handler=_cmd_generate)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    log = setup_logger()

    try:
        return args.handler(args)
    except ParserError as exc:
        log.error("Extraction failed", extra={"code": exc.code, "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
