"""Result objects and diagnostic types for charset validation.

This module defines the status codes, diagnostic entries and performance
metrics shared by the validation engine, the API and the command-line tool.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, Dict, Optional


class ValidationStatus(IntEnum):
    """Outcome of a validation run.

    The numeric values are the process exit codes of the ``cvc`` tool.
    """

    VALID = 0
    INVALID = 1
    EOL_MISMATCH = 2
    UNSPECIFIC_FAILURE = 3
    INPUT_UNAVAILABLE = 4
    INVALID_CONFIGURATION = 5

    @property
    def description(self) -> str:
        """Human-readable meaning of the status."""
        return _STATUS_DESCRIPTIONS[self]


_STATUS_DESCRIPTIONS = {
    ValidationStatus.VALID: "valid",
    ValidationStatus.INVALID: "validation failed",
    ValidationStatus.EOL_MISMATCH: "EOL indicator mismatch",
    ValidationStatus.UNSPECIFIC_FAILURE: "unspecific error",
    ValidationStatus.INPUT_UNAVAILABLE: "input error, e.g., file could not be read",
    ValidationStatus.INVALID_CONFIGURATION: "invalid parameter",
}


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()      # Debug-level information
    INFO = auto()       # Informational messages
    WARNING = auto()    # Input is acceptable but noteworthy
    ERROR = auto()      # Validation failed


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    line: Optional[int] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")
        if self.line is not None and self.line < 1:
            raise ValueError("Diagnostic line must be >= 1")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the entry to a JSON-serializable dictionary."""
        return {
            "severity": self.severity.name,
            "message": self.message,
            "component": self.component,
            "line": self.line,
            "details": self.details,
        }


@dataclass
class PerformanceMetrics:
    """Performance metrics for a validation run."""

    processing_time_ms: float = 0.0
    memory_used_bytes: int = 0
    bytes_processed: int = 0
    lines_processed: int = 0

    @property
    def bytes_per_second(self) -> float:
        """Calculate bytes processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.bytes_processed * 1000.0) / self.processing_time_ms

    @property
    def memory_per_byte(self) -> float:
        """Calculate memory usage per input byte."""
        if self.bytes_processed == 0:
            return 0.0
        return self.memory_used_bytes / self.bytes_processed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processing_time_ms": self.processing_time_ms,
            "memory_used_bytes": self.memory_used_bytes,
            "bytes_processed": self.bytes_processed,
            "lines_processed": self.lines_processed,
        }
