"""
Logging helpers shared by the calculation, storage and export layers

The plain '%(message)s' format drops `extra`, so the context is also
appended to the message as key=value pairs.
"""

import time
import logging
from typing import Any, Dict, Optional
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def format_context(context: Dict[str, Any]) -> str:
    """'key=value' pairs in insertion order"""
    return " ".join(f"{key}={value}" for key, value in context.items())


class Timer:
    """Measures a block and logs its duration in milliseconds at DEBUG."""

    def __init__(self, name: str, logger: Optional[logging.Logger] = None):
        self.name = name
        self.logger = logger or logging.getLogger(__name__)
        self._start: Optional[float] = None
        self.elapsed_ms: Optional[float] = None

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
        self.logger.debug(f"[TIMER] {self.name} took {self.elapsed_ms:.1f}ms")


@contextmanager
def log_operation(operation_name: str, context: Dict[str, Any], logger: Optional[logging.Logger] = None):
    """
    Log the start, completion or failure of an operation with its context.

    Failures are logged and re-raised unchanged.

    Usage:
        with log_operation("pdf_export", {"title": document.title}, logger):
            ...
    """
    logger = logger or logging.getLogger(__name__)
    tag = f"[{operation_name.upper()}]"
    details = format_context(context)
    started = time.perf_counter()

    logger.info(f"{tag} started {details}", extra={'operation': operation_name, 'context': context})
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - started
        logger.error(
            f"{tag} failed after {elapsed:.2f}s: {type(e).__name__}: {e}",
            extra={'operation': operation_name, 'context': context, 'elapsed_seconds': elapsed}
        )
        raise

    elapsed = time.perf_counter() - started
    logger.info(
        f"{tag} completed in {elapsed:.2f}s",
        extra={'operation': operation_name, 'context': context, 'elapsed_seconds': elapsed}
    )


def log_with_context(level: str, message: str, context: Dict[str, Any], logger: Optional[logging.Logger] = None):
    """
    Log a message followed by its context.

    Args:
        level: Level name (debug, info, warning, error)
        message: Log message
        context: Values appended as key=value pairs
        logger: Logger to use (module logger if None)
    """
    logger = logger or logging.getLogger(__name__)
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logger.log(log_level, f"{message} ({format_context(context)})", extra={'context': context})
