# ============================================================================
# FILE: tests/unit/test_line_scanner.py
# ============================================================================
"""
Unit tests for analyte location in report lines
"""

import pytest

from bloodwork.constants import lookup
from bloodwork.processors.blood_report.agents.line_scanner import LineScanner, split_lines


@pytest.fixture
def scanner():
    return LineScanner()


def test_split_lines_any_newline():
    """CRLF, CR and LF all split lines"""
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]


def test_first_line_wins(scanner):
    lines = split_lines("Sodium 134 mmol/L\nSerum sodium 140 mmol/L")
    match = scanner.find_first_match(lines, lookup("sodium"))

    assert match.line_index == 0
    assert match.line == "Sodium 134 mmol/L"


def test_case_insensitive(scanner):
    lines = split_lines("patient notes\n  HEMOGLOBIN 14 G/DL  ")
    match = scanner.find_first_match(lines, lookup("hemoglobin"))

    assert match.line_index == 1
    assert match.line == "HEMOGLOBIN 14 G/DL"
    assert match.synonym == "hemoglobin"
    assert match.offset == 0


def test_declared_synonym_order(scanner):
    """Earlier synonym in the catalog wins even if a later one appears first"""
    lines = ["Glycated haemoglobin HbA1c 5.4 %"]
    match = scanner.find_first_match(lines, lookup("hba1c"))

    assert match.synonym == "hba1c"
    assert match.offset == lines[0].lower().find("hba1c")


def test_alternate_synonym(scanner):
    lines = ["Total Leucocyte Count 7,200 cells/mm³"]
    match = scanner.find_first_match(lines, lookup("wbc"))

    assert match.synonym == "total leucocyte count"


def test_offset_relative_to_trimmed_line(scanner):
    lines = ["      Random sample glucose 92"]
    match = scanner.find_first_match(lines, lookup("glucose"))

    assert match.offset == len("Random sample ")


def test_no_match(scanner):
    assert scanner.find_first_match(split_lines("lorem ipsum"), lookup("tsh")) is None
    assert scanner.find_first_match([], lookup("tsh")) is None


def test_offset_in_original_line(scanner):
    """Offset indexes the original line even when lowercasing changes its length"""
    lines = ["İİ Sodium 140 mmol/L"]
    match = scanner.find_first_match(lines, lookup("sodium"))

    assert match.line[match.offset:match.offset + len("sodium")] == "Sodium"


def test_excluded_line_skipped(scanner):
    lines = ["Non-HDL Cholesterol 150 mg/dL", "HDL Cholesterol 45 mg/dL"]
    match = scanner.find_first_match(lines, lookup("hdl"))

    assert match.line_index == 1


def test_only_excluded_lines(scanner):
    lines = ["VLDL Cholesterol 25 mg/dL"]

    assert scanner.find_first_match(lines, lookup("ldl")) is None
