"""Shared utilities for tag checking.

This module provides the configuration object, result and diagnostic types,
and logging helpers used across all layers.
"""

from .config import (
    CheckerConfig,
    ConfigError,
    ConfigValidationError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    SUCCESS_MESSAGE,
    Diagnostic,
    DiagnosticKind,
    ValidationMetrics,
    ValidationReport,
)

__all__ = [
    "CheckerConfig",
    "ConfigError",
    "ConfigValidationError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "SUCCESS_MESSAGE",
    "Diagnostic",
    "DiagnosticKind",
    "ValidationMetrics",
    "ValidationReport",
]
