# src/bloodwork/processors/blood_report/utils/parsing.py
"""
Parsing utilities for blood parameter extraction.
"""

import math
import re
from typing import Optional

from ....constants import UNIT_ALIASES

# A number not glued to other digits: "12.5" is never read as "5" and
# "4,500" is never read as "500".
_NUMBER_BOUNDARY_BEFORE = r'(?<![\d.])(?<!\d,)'
_NUMBER_BOUNDARY_AFTER = r'(?![\d])(?!,\d)(?!\.\d)'

# A hyphen glued to the number and not preceded by a digit is a minus sign
# ("-140"); after a digit it separates a range ("13.5-17.5").
_SIGN = r'(?P<sign>(?<![\d.])-)?'

PLAIN_NUMBER = r'\d+(?:\.\d+)?'
THOUSANDS_NUMBER = r'(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?'

# Longest spellings first so "10^3/ul" wins over a shorter overlap
_UNIT_ALTERNATION = '|'.join(
    re.escape(unit) for unit in sorted(UNIT_ALIASES, key=len, reverse=True)
)
# Units ending in a letter must not run into another word ("mg/dlx")
UNIT_PATTERN = rf'(?P<unit>{_UNIT_ALTERNATION})(?![a-z])'


def number_pattern(number: str) -> str:
    """Wrap a number regex in the digit-boundary guards and an optional sign."""
    return rf'{_SIGN}{_NUMBER_BOUNDARY_BEFORE}(?P<number>{number}){_NUMBER_BOUNDARY_AFTER}'


def compile_value_pattern(number: str, with_unit: bool) -> re.Pattern:
    """Compile a case-insensitive value pattern, optionally requiring a unit."""
    pattern = number_pattern(number)
    if with_unit:
        pattern += r'\s*' + UNIT_PATTERN
    return re.compile(pattern, re.IGNORECASE)


def parse_numeric_value(value_str: str) -> Optional[float]:
    """
    Parse a matched numeric literal.

    Commas are treated as thousands separators and stripped. Returns None
    for anything that is not a finite, strictly positive number; such a
    literal can never be a usable lab value.

    Handles values like:
    - "16.3"
    - "4,500"
    - "309"
    """
    if not value_str:
        return None

    cleaned = value_str.strip().replace(',', '')
    try:
        value = float(cleaned)
    except ValueError:
        return None

    if not math.isfinite(value) or value <= 0:
        return None
    return value


def compile_synonym_pattern(synonym: str) -> re.Pattern:
    """Case-insensitive literal pattern for an analyte name."""
    return re.compile(re.escape(synonym), re.IGNORECASE)


def find_synonym_offset(line: str, synonym: str) -> int:
    """Case-insensitive offset of synonym in the original line, -1 if absent."""
    found = compile_synonym_pattern(synonym).search(line)
    return found.start() if found else -1
