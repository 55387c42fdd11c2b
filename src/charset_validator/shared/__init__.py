"""Shared utilities for charset validation.

This module provides the configuration object, result and status types, and
logging helpers used across all layers.
"""

from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    PerformanceMetrics,
    ValidationStatus,
)
from .config import (
    ConfigError,
    ConfigValidationError,
    ValidatorConfig,
)

__all__ = [
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "PerformanceMetrics",
    "ValidationStatus",
    "ConfigError",
    "ConfigValidationError",
    "ValidatorConfig",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
