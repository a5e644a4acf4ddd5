# ============================================================================
# src/bloodwork/processors/blood_report/agents/line_scanner.py
# ============================================================================
"""
Line Scanner - Analyte Location

Finds the first report line mentioning an analyte:
1. Split the report into lines
2. Walk lines in document order, skipping lines that name a related test
   listed in the analyte's exclusions ("Non-HDL" for HDL)
3. On each line, try the analyte's synonyms in declared order

The first line containing any synonym wins; later (possibly cleaner)
mentions are never consulted.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from ....constants import AnalyteDefinition
from ..utils.parsing import compile_synonym_pattern


@dataclass(frozen=True)
class LineMatch:
    line_index: int
    line: str        # Original line, trimmed
    synonym: str     # First synonym (declared order) found on the line
    offset: int      # Synonym position within the trimmed original line


def split_lines(text: str) -> List[str]:
    """Split report text on any newline boundary."""
    return text.splitlines()


class LineScanner:
    """
    Locate an analyte in report text by case-insensitive substring match.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def find_first_match(
        self,
        lines: List[str],
        analyte: AnalyteDefinition
    ) -> Optional[LineMatch]:
        """
        Find the first line containing any synonym of the analyte.

        Args:
            lines: Report lines (see split_lines)
            analyte: Catalog entry to look for

        Returns:
            LineMatch for the earliest matching line, or None
        """
        patterns = [
            (synonym.lower(), compile_synonym_pattern(synonym))
            for synonym in analyte.synonyms
        ]
        exclusions = [compile_synonym_pattern(name) for name in analyte.exclusions]

        for index, raw_line in enumerate(lines):
            line = raw_line.strip()
            if any(pattern.search(line) for pattern in exclusions):
                continue

            for synonym, pattern in patterns:
                # Offsets come from the original line; lower() may change
                # its length ("İ" lowercases to two code points)
                found = pattern.search(line)
                if found:
                    self.logger.debug(
                        f"{analyte.key}: matched '{synonym}' on line {index}"
                    )
                    return LineMatch(
                        line_index=index,
                        line=line,
                        synonym=synonym,
                        offset=found.start(),
                    )

        return None
