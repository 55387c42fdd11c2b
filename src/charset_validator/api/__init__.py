"""Public validation API: input loading and the validation pipeline."""

from .input import (
    InputAllocationError,
    InputBuffer,
    InputUnavailableError,
    ValidatorError,
    load_file,
    load_stream,
)
from .validator import (
    CharsetValidator,
    ValidationResult,
    validate_bytes,
    validate_file,
    validate_files,
    validate_stream,
)

__all__ = [
    "CharsetValidator",
    "ValidationResult",
    "validate_bytes",
    "validate_file",
    "validate_files",
    "validate_stream",
    "InputBuffer",
    "load_file",
    "load_stream",
    "ValidatorError",
    "InputAllocationError",
    "InputUnavailableError",
]
