# ============================================================================
# FILE: tests/unit/test_cli.py
# ============================================================================
"""
Unit tests for the extraction command line script
"""

import io
import json
import logging

import pytest

from scripts.extract_blood_report import main


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put them back afterwards"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_text_report(tmp_path, capsys):
    report = tmp_path / "report.txt"
    report.write_text("Hemoglobin: 16.3 g/dL\nSodium 134 mmol/L", encoding="utf-8")

    exit_code = main([str(report), "--log-level", "WARNING"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["parameters"]["hemoglobin"]["value"] == 16.3
    assert output["parameters"]["sodium"]["status"] == "low"
    assert output["summary"]["totalParameters"] == 2


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("TSH 2.5 µIU/mL"))

    assert main(["-", "--log-level", "WARNING"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["parameters"]["tsh"]["unit"] == "µIU/mL"


def test_logs_stay_off_stdout(tmp_path, capsys):
    report = tmp_path / "report.txt"
    report.write_text("Glucose 89 mg/dL", encoding="utf-8")

    assert main([str(report), "--log-level", "INFO"]) == 0

    captured = capsys.readouterr()
    assert json.loads(captured.out)["summary"]["totalParameters"] == 1
    assert "Extracted 1/18 parameters" in captured.err


def test_unsupported_file(tmp_path, capsys):
    report = tmp_path / "report.docx"
    report.write_bytes(b"binary")

    assert main([str(report), "--log-level", "WARNING"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "--log-level", "WARNING"]) == 1
