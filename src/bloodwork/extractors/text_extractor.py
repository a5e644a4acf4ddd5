# src/bloodwork/extractors/text_extractor.py
"""
Text acquisition for uploaded blood reports.

Text sources (picked by file extension):
1. PdfTextSource: pdfplumber, page texts joined by newlines
2. PlainTextSource: .txt reports read as UTF-8

The extraction engine only ever sees the resulting plain text; no OCR is
attempted for image-only PDF pages (they contribute no lines).
"""

from pathlib import Path
from typing import Callable, Dict
import logging

import pdfplumber

from ..utils.exceptions import TextExtractionError, UnsupportedFileTypeError


class TextSource:
    """Reads the plain text of a report file."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def read_text(self, file_path: Path) -> str:
        raise NotImplementedError


class PlainTextSource(TextSource):
    """Plain-text reports (already extracted elsewhere)."""

    def read_text(self, file_path: Path) -> str:
        file_path = Path(file_path)
        try:
            text = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise TextExtractionError(f"Cannot read {file_path.name}: {e}") from e

        self.logger.debug(f"Read {len(text)} chars from {file_path.name}")
        return text


class PdfTextSource(TextSource):
    """Text-layer PDFs via pdfplumber."""

    def read_text(self, file_path: Path) -> str:
        file_path = Path(file_path)
        try:
            with pdfplumber.open(file_path) as pdf:
                page_texts = [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            raise TextExtractionError(
                f"pdfplumber failed on {file_path.name}: {e}"
            ) from e

        empty_pages = [i + 1 for i, t in enumerate(page_texts) if not t.strip()]
        if empty_pages:
            self.logger.warning(
                f"{file_path.name}: no text layer on pages {empty_pages} (scanned?)"
            )

        text = "\n".join(page_texts)
        self.logger.debug(
            f"pdfplumber extracted {len(text)} chars from {len(page_texts)} pages"
        )
        return text


TEXT_SOURCES: Dict[str, Callable[[], TextSource]] = {
    ".pdf": PdfTextSource,
    ".txt": PlainTextSource,
}


def get_text_source(file_path: Path) -> TextSource:
    """
    Pick the text source for a file by extension.

    Raises:
        UnsupportedFileTypeError: no source handles this extension
    """
    suffix = Path(file_path).suffix.lower()
    factory = TEXT_SOURCES.get(suffix)
    if factory is None:
        raise UnsupportedFileTypeError(
            f"No text source for '{suffix or Path(file_path).name}' files",
            suffix=suffix,
        )
    return factory()
