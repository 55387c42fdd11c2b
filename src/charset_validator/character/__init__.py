"""Character validation layer.

This package contains the validation engine: EOL detection and consistency
checking, the character policy, and the charset scanner.
"""

from .eol import (
    EolConsistencyChecker,
    EolDetector,
    EolStyle,
    detect_eol,
    validate_eol,
)
from .policy import CharacterPolicy
from .scanner import (
    CharsetScanner,
    DiagnosticReport,
    ScanListener,
    Violation,
    display_char,
    scan,
)

__all__ = [
    # EOL handling
    "EolStyle",
    "EolDetector",
    "EolConsistencyChecker",
    "detect_eol",
    "validate_eol",
    # Character policy
    "CharacterPolicy",
    # Scanning
    "CharsetScanner",
    "DiagnosticReport",
    "ScanListener",
    "Violation",
    "display_char",
    "scan",
]
