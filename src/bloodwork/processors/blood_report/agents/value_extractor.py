# ============================================================================
# src/bloodwork/processors/blood_report/agents/value_extractor.py
# ============================================================================
"""
Value Extractor - Numeric Value + Unit

Reads the value of a matched analyte from its report line. Every strategy
is tried and the highest-confidence candidate is kept:
1. unit            - number directly followed by a known unit
2. unit_thousands  - same, tolerant of thousands separators ("4,500")
3. bare            - bare number, no unit (lowest-confidence fallback)

Only the text after the matched synonym is searched, so digits inside an
analyte name ("Vitamin B12", "HbA1c") are never read as the value.

Confidence is a heuristic, not a probability:
    base(strategy)
    + UNIT_BOOST        if a recognized unit follows the value
    + MAGNITUDE_BOOST   if 0 < value < PLAUSIBLE_MAX
    + NEAR_START_BOOST  if the synonym sits near the start of the line
clamped to [0, 1].
"""

from dataclasses import dataclass
from typing import List, Optional
import logging
import re

from ....config import ExtractionSettings, extraction_settings
from ....constants import normalize_unit
from ..utils.parsing import (
    PLAIN_NUMBER,
    THOUSANDS_NUMBER,
    compile_value_pattern,
    find_synonym_offset,
    parse_numeric_value,
)
from ....core.confidence import clamp_confidence
from ....core.results import ExtractionCandidate


@dataclass(frozen=True)
class ExtractionStrategy:
    name: str
    pattern: re.Pattern
    base_confidence: float


def build_strategies(settings: ExtractionSettings) -> List[ExtractionStrategy]:
    """Strategies in the order they are tried."""
    return [
        ExtractionStrategy(
            name="unit",
            pattern=compile_value_pattern(PLAIN_NUMBER, with_unit=True),
            base_confidence=settings.UNIT_BASE_CONFIDENCE,
        ),
        ExtractionStrategy(
            name="unit_thousands",
            pattern=compile_value_pattern(THOUSANDS_NUMBER, with_unit=True),
            base_confidence=settings.UNIT_THOUSANDS_BASE_CONFIDENCE,
        ),
        ExtractionStrategy(
            name="bare",
            pattern=compile_value_pattern(THOUSANDS_NUMBER, with_unit=False),
            base_confidence=settings.BARE_BASE_CONFIDENCE,
        ),
    ]


class ValueExtractor:
    """
    Extract the most plausible numeric value and unit from a report line.
    """

    def __init__(self, settings: Optional[ExtractionSettings] = None):
        self.settings = settings or extraction_settings
        self.strategies = build_strategies(self.settings)
        self.logger = logging.getLogger(__name__)

    def extract(
        self,
        line: str,
        synonym: Optional[str] = None,
        offset: Optional[int] = None
    ) -> Optional[ExtractionCandidate]:
        """
        Extract the best candidate from a line.

        Args:
            line: Report line (trimmed)
            synonym: Matched synonym; search starts after it. None searches
                the whole line and gives no near-start boost.
            offset: Synonym position in the line, if already known

        Returns:
            Highest-confidence ExtractionCandidate, or None if the line
            holds no usable number
        """
        region = line
        near_start = False

        if synonym:
            if offset is None or offset < 0:
                offset = find_synonym_offset(line, synonym)
            if offset >= 0:
                region = line[offset + len(synonym):]
                near_start = offset <= self.settings.NEAR_START_WINDOW

        best: Optional[ExtractionCandidate] = None
        for strategy in self.strategies:
            candidate = self._apply_strategy(strategy, region, near_start)
            # Strict comparison: on a tie the earlier strategy is kept
            if candidate and (best is None or candidate.confidence > best.confidence):
                best = candidate

        return best

    def _apply_strategy(
        self,
        strategy: ExtractionStrategy,
        region: str,
        near_start: bool
    ) -> Optional[ExtractionCandidate]:
        for match in strategy.pattern.finditer(region):
            literal = (match.group("sign") or "") + match.group("number")
            value = parse_numeric_value(literal)
            if value is None:
                # Zero, negative or non-finite; keep looking further along
                self.logger.debug(
                    f"{strategy.name}: discarded numeric literal '{literal}'"
                )
                continue

            unit = ""
            if "unit" in match.groupdict() and match.group("unit"):
                unit = normalize_unit(match.group("unit")) or ""

            return ExtractionCandidate(
                value=value,
                unit=unit,
                confidence=self._score(strategy.base_confidence, value, unit, near_start),
                strategy=strategy.name,
            )

        return None

    def _score(
        self,
        base: float,
        value: float,
        unit: str,
        near_start: bool
    ) -> float:
        confidence = base

        if unit:
            confidence += self.settings.UNIT_BOOST

        if 0 < value < self.settings.PLAUSIBLE_MAX:
            confidence += self.settings.MAGNITUDE_BOOST

        if near_start:
            confidence += self.settings.NEAR_START_BOOST

        return clamp_confidence(confidence)
