# ============================================================================
# src/bloodwork/processors/blood_report/processor.py
# ============================================================================
"""
Blood Report Processor

Turns raw report text into structured blood parameters.

For every catalog analyte, independently:
1. LineScanner       → first line mentioning the analyte
2. ValueExtractor    → best numeric value + unit on that line
3. StatusClassifier  → low / normal / high / unknown

Analytes that are not mentioned, or whose line holds no usable number, are
left out of the result entirely. Content never makes extraction fail; only
a non-string input does.

The processor holds no per-call state, so one instance can serve
concurrent requests.
"""

from typing import Dict, Iterable, List, Optional
import logging

from ...config import ExtractionSettings, extraction_settings
from ...constants import AnalyteDefinition, iter_analytes
from ...core.confidence import ConfidenceThresholds, clamp_confidence, summarize
from ...core.results import ExtractedParameter, ExtractionCandidate, ExtractionResult
from ...utils.exceptions import InputTypeError
from .agents.line_scanner import LineMatch, LineScanner, split_lines
from .agents.status_classifier import StatusClassifier
from .agents.value_extractor import ValueExtractor

logger = logging.getLogger(__name__)


class BloodReportProcessor:
    """
    Extraction orchestrator for blood reports.

    All collaborators are injectable; defaults use the static catalog and
    the configured scoring settings.
    """

    def __init__(
        self,
        catalog: Optional[Iterable[AnalyteDefinition]] = None,
        scanner: Optional[LineScanner] = None,
        extractor: Optional[ValueExtractor] = None,
        classifier: Optional[StatusClassifier] = None,
        thresholds: Optional[ConfidenceThresholds] = None,
        settings: Optional[ExtractionSettings] = None,
    ):
        self.settings = settings or extraction_settings
        self.catalog = tuple(iter_analytes() if catalog is None else catalog)
        self.scanner = scanner or LineScanner()
        self.extractor = extractor or ValueExtractor(self.settings)
        self.classifier = classifier or StatusClassifier()
        self.thresholds = thresholds or ConfidenceThresholds.from_settings()

    def extract(self, text: str) -> ExtractionResult:
        """
        Extract all known blood parameters from report text.

        Args:
            text: Plain text of a lab report

        Returns:
            ExtractionResult keyed by analyte key

        Raises:
            InputTypeError: text is not a str
        """
        if not isinstance(text, str):
            raise InputTypeError(text)

        lines = split_lines(text)
        parameters: Dict[str, ExtractedParameter] = {}

        for analyte in self.catalog:
            parameter = self._extract_analyte(lines, analyte)
            if parameter is not None:
                parameters[analyte.key] = parameter

        summary = summarize(parameters.values(), self.thresholds)
        logger.info(
            f"Extracted {summary.total_parameters}/{len(self.catalog)} parameters "
            f"from {len(lines)} lines "
            f"(high={summary.high_confidence}, medium={summary.medium_confidence}, "
            f"low={summary.low_confidence})"
        )

        return ExtractionResult(parameters=parameters, summary=summary)

    def _extract_analyte(
        self,
        lines: List[str],
        analyte: AnalyteDefinition
    ) -> Optional[ExtractedParameter]:
        match = self.scanner.find_first_match(lines, analyte)
        if match is None:
            return None

        candidate = self.extractor.extract(match.line, match.synonym, match.offset)
        if candidate is None:
            candidate = self._extract_from_neighbors(lines, match)

        if candidate is None:
            logger.debug(
                f"{analyte.key}: found on line {match.line_index} but no numeric value"
            )
            return None

        return ExtractedParameter(
            display_name=analyte.display_name,
            value=candidate.value,
            unit=candidate.unit or analyte.default_unit,
            confidence=candidate.confidence,
            normal_range=analyte.normal_range_text,
            status=self.classifier.classify(candidate.value, analyte.key),
            raw_text=match.line,
        )

    def _extract_from_neighbors(
        self,
        lines: List[str],
        match: LineMatch
    ) -> Optional[ExtractionCandidate]:
        """Look at the following lines for tabular layouts (value below name)."""
        for distance in range(1, self.settings.NEIGHBOR_LINES + 1):
            index = match.line_index + distance
            if index >= len(lines):
                break

            candidate = self.extractor.extract(lines[index].strip())
            if candidate is not None:
                penalty = self.settings.NEIGHBOR_LINE_PENALTY * distance
                candidate.confidence = clamp_confidence(candidate.confidence - penalty)
                return candidate

        return None


_default_processor: Optional[BloodReportProcessor] = None


def get_processor() -> BloodReportProcessor:
    """Shared processor built from the default catalog and settings."""
    global _default_processor
    if _default_processor is None:
        _default_processor = BloodReportProcessor()
    return _default_processor


def extract(text: str) -> ExtractionResult:
    """Extract blood parameters from report text with the default processor."""
    return get_processor().extract(text)
