"""
Custom Error Types for the CoolCalc heat load system

The heat load calculation itself never raises on numeric input; these
errors belong to the edges of the system (input files, configuration,
PDF export and sharing).
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class CoolCalcError(Exception):
    """Base exception for all CoolCalc errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(CoolCalcError):
    """
    Configuration errors that prevent proper operation.

    Examples:
    - Output directory cannot be created
    - wkhtmltopdf binary missing
    """
    pass


class InputFileError(CoolCalcError):
    """
    Parameter file could not be read or validated.

    Examples:
    - File not found
    - Invalid JSON
    - Wrong field types
    """
    pass


class ExportError(CoolCalcError):
    """
    PDF generation or sharing failed.

    Examples:
    - wkhtmltopdf returned an error
    - Share target rejected the file
    """
    pass


def log_error_with_context(error: CoolCalcError, context: Dict[str, Any]):
    """
    Log error with additional context information.

    Args:
        error: Error to log
        context: Additional context (file, stage, etc.)
    """
    log_data = {
        'error_type': type(error).__name__,
        'error_message': error.message,
        'details': error.details,
        'context': context
    }
    logger.error(f"{type(error).__name__}: {error.message}", extra=log_data)
