"""Character Set Validator for C/C++ source code.

Checks that a byte stream uses only the basic source character set and one
consistent end-of-line convention, and reports offending bytes by line.

Progressive API Disclosure:
- Level 1: Simple functions - validate_bytes(), validate_file(), validate_stream()
- Level 2: Configured validator - CharsetValidator with ValidatorConfig
- Level 3: Engine components - EolDetector, EolConsistencyChecker, CharsetScanner
"""

__version__ = "0.1.0"
__author__ = "Charset Validator Team"

from .api import (
    CharsetValidator,
    InputUnavailableError,
    ValidationResult,
    ValidatorError,
    validate_bytes,
    validate_file,
    validate_files,
    validate_stream,
)
from .character import CharacterPolicy, DiagnosticReport, EolStyle, Violation
from .shared import ConfigError, ValidationStatus, ValidatorConfig

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple validation functions
    "validate_bytes",
    "validate_file",
    "validate_files",
    "validate_stream",

    # Level 2: Configured validator
    "CharsetValidator",
    "ValidatorConfig",

    # Result objects and data structures
    "ValidationResult",
    "ValidationStatus",
    "DiagnosticReport",
    "Violation",
    "CharacterPolicy",
    "EolStyle",

    # Errors
    "ConfigError",
    "ValidatorError",
    "InputUnavailableError",
]
