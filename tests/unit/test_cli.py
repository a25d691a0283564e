"""
Name: CLI Tests

Responsibilities:
  - Validate the text / phases / generate subcommands end-to-end
  - Validate exit codes (0 ok, 1 extraction error, 2 usage error)
"""

import json
import logging

import pytest
from prd_extractor.cli import build_parser, main
from prd_extractor.crosscutting.logger import LOGGER_NAME

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _detach_cli_log_handlers():
    log = logging.getLogger(LOGGER_NAME)
    previous = list(log.handlers)
    yield
    log.handlers[:] = previous


@pytest.fixture
def prd_file(tmp_path, prd_text):
    path = tmp_path / "prd.txt"
    path.write_text(prd_text, encoding="utf-8")
    return path


def test_text_prints_document_text(prd_file, prd_text, capsys):
    assert main(["text", str(prd_file)]) == 0

    assert capsys.readouterr().out == prd_text + "\n"


def test_phases_names_only(prd_file, capsys):
    assert main(["phases", str(prd_file), "--names-only"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "Initial",
        "Phase 1: Onboarding",
        "Phase 2: Payments",
    ]


def test_phases_json(prd_file, capsys):
    assert main(["phases", str(prd_file)]) == 0

    phases = json.loads(capsys.readouterr().out)
    assert phases[2] == {
        "name": "Phase 2: Payments",
        "snippet": "Phase 2: Payments\nUsers can add a card. Cards are validated.",
    }


def test_undecodable_document_exits_with_error(tmp_path, capsys):
    broken = tmp_path / "broken.docx"
    broken.write_bytes(b"not a docx")

    assert main(["text", str(broken)]) == 1

    assert "error:" in capsys.readouterr().err


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["text", str(tmp_path / "missing.pdf")])

    assert "Cannot read" in str(exc.value.code)


def test_generate_requires_phase_choice(prd_file, capsys):
    code = main(["generate", prd_file.name, "--repo-id", "repo", "--root", str(prd_file.parent)])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["needPhase"] is True
    assert out["storagePath"] == "prd.txt"


def test_generate_creates_test_cases_for_phase(prd_file, capsys):
    code = main(
        [
            "generate",
            prd_file.name,
            "--repo-id",
            "repo",
            "--root",
            str(prd_file.parent),
            "--phase",
            "Phase 1: Onboarding",
            "--user-email",
            "qa@example.com",
        ]
    )

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["success"] is True
    assert out["usedFallback"] is True
    assert out["testcases"][0]["lastUpdatedBy"] == "qa@example.com"
    assert out["testcases"][0]["phase"] == "Phase 1: Onboarding"


def test_generate_missing_document_exits_with_error(tmp_path, capsys):
    code = main(["generate", "nope.pdf", "--repo-id", "repo", "--root", str(tmp_path)])

    assert code == 1
    assert json.loads(capsys.readouterr().out)["code"] == "NOT_FOUND"


def test_generate_bad_root_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["generate", "a.txt", "--repo-id", "r", "--root", str(tmp_path / "nope")])


def test_usage_error_exit_code():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["generate", "a.txt"])

    assert exc.value.code == 2
