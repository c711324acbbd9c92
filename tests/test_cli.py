"""Tests for the command-line entry point."""

import json

from tests.conftest import CLEAN_DOC, FRAMELESS_DOC, SMILEY_DOC
from vectorlint.cli import EXIT_INPUT_ERROR, EXIT_INVALID, EXIT_VALID, main


def _write(tmp_path, data) -> str:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_valid_document(tmp_path, capsys):
    assert main([_write(tmp_path, CLEAN_DOC)]) == EXIT_VALID
    out = json.loads(capsys.readouterr().out)
    assert out["overall"]["score"] == 100
    assert "quickFixes" in out


def test_invalid_document(tmp_path):
    assert main([_write(tmp_path, FRAMELESS_DOC)]) == EXIT_INVALID


def test_quick_mode(tmp_path, capsys):
    assert main(["--quick", _write(tmp_path, FRAMELESS_DOC)]) == EXIT_INVALID
    out = json.loads(capsys.readouterr().out)
    assert out["criticalIssues"] == ["Missing viewBox"]


def test_auto_fix_mode(tmp_path, capsys):
    assert main(["--auto-fix", "--preset", "accessibility", _write(tmp_path, SMILEY_DOC)]) == EXIT_VALID
    out = json.loads(capsys.readouterr().out)
    assert out["autoFixedDocument"]["title"] == "SVG Document"
    assert len(out["appliedFixes"]) == 2


def test_input_errors(tmp_path):
    assert main([str(tmp_path / "absent.json")]) == EXIT_INPUT_ERROR
    bad = tmp_path / "bad.json"
    bad.write_text('{"elements": [{"type": "circle", "cx": "left"}]}', encoding="utf-8")
    assert main([str(bad)]) == EXIT_INPUT_ERROR
