#!/usr/bin/env python3
"""
Blood Report Extraction Script

Extracts blood parameters from a report (PDF or plain text) and prints the
result as JSON: parameters keyed by analyte, plus a confidence summary.

Usage:
    python scripts/extract_blood_report.py report.pdf
    python scripts/extract_blood_report.py report.txt --log-level DEBUG
    python scripts/extract_blood_report.py - < report.txt   # read stdin
"""

import json
import sys
from pathlib import Path
from typing import List, Optional
import argparse

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bloodwork import extract
from bloodwork.config import logging_settings
from bloodwork.extractors import get_text_source
from bloodwork.utils import BloodworkError, setup_logging


def read_report(path_arg: str) -> str:
    if path_arg == "-":
        return sys.stdin.read()
    path = Path(path_arg)
    return get_text_source(path).read_text(path)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Extract blood parameters from a lab report")
    parser.add_argument("report", help="Path to a .pdf or .txt report, or '-' for stdin")
    parser.add_argument("--log-level", default=logging_settings.LOG_LEVEL, help="Logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    args = parser.parse_args(argv)

    # Logs go to stderr so stdout stays valid JSON
    setup_logging(args.log_level, format_json=args.json_logs, stream=sys.stderr)

    try:
        result = extract(read_report(args.report))
    except BloodworkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
