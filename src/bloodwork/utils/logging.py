# ============================================================================
# src/bloodwork/utils/logging.py
# ============================================================================
"""
Logging setup for the API server and the extraction script.

The API logs to stdout (and optionally a file); the script logs to stderr
so its stdout stays a clean JSON document.
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, TextIO

_TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_json: bool = False,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure the root logger, replacing any handlers already installed.

    Args:
        level: Level name (DEBUG, INFO, ...)
        log_file: Also write to this file
        format_json: Use JsonFormatter instead of plain text
        stream: Console stream (stdout when omitted)
    """
    formatter = JsonFormatter() if format_json else logging.Formatter(
        _TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level.upper(), handlers=handlers, force=True)


def log_performance(logger: logging.Logger, operation: str):
    """Log how long each call of the decorated function takes, and failures."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{operation} failed after {time.perf_counter() - started:.3f}s: {e}"
                )
                raise
            logger.info(f"{operation} completed in {time.perf_counter() - started:.3f}s")
            return result
        return wrapper
    return decorator
