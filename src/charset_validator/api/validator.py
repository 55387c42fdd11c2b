"""Validation pipeline API.

Runs EOL detection, EOL consistency checking and the charset scan over a
complete input buffer, following the progressive disclosure of the package:
module-level ``validate_*`` functions for simple use, CharsetValidator for
repeated validation with one configuration.
"""

import time
import uuid
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Sequence, Union

import psutil

from charset_validator.character import (
    CharsetScanner,
    DiagnosticReport,
    EolConsistencyChecker,
    EolDetector,
    EolStyle,
    ScanListener,
)
from charset_validator.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    PerformanceMetrics,
    ValidationStatus,
    ValidatorConfig,
    get_logger,
)
from charset_validator.shared.logging import CorrelationLogger

from .input import InputUnavailableError, load_file, load_stream

MS_PER_SECOND = 1000


@dataclass
class ValidationResult:
    """Outcome of validating one input.

    Attributes:
        status: Overall result, also the exit code of the CLI
        eol_style: EOL style the input was checked against
        eol_error_line: First line with a foreign terminator, 0 if consistent
        report: Charset diagnostics; None if the scan did not run
        input_size: Number of input bytes
        source: File name or other description of the input
        diagnostics: Messages collected along the pipeline
        performance: Timing and memory figures
        correlation_id: Identifier tying log records to this run
    """

    status: ValidationStatus
    eol_style: EolStyle = EolStyle.UNSPECIFIED
    eol_error_line: int = 0
    report: Optional[DiagnosticReport] = None
    input_size: int = 0
    source: Optional[str] = None
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None

    @property
    def success(self) -> bool:
        """True when the input is valid."""
        return self.status == ValidationStatus.VALID

    @property
    def is_empty(self) -> bool:
        return self.input_size == 0

    @property
    def total_errors(self) -> int:
        """Number of charset violations; 0 when the scan did not run."""
        return self.report.total_errors if self.report is not None else 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "source": self.source,
            "status": self.status.name,
            "exit_code": int(self.status),
            "eol_style": self.eol_style.option_name,
            "eol_error_line": self.eol_error_line,
            "input_size": self.input_size,
            "total_errors": self.total_errors,
            "violations": (
                [v.to_dict() for v in self.report.violations] if self.report else []
            ),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "performance": self.performance.to_dict(),
        }


class CharsetValidator:
    """Validator bound to one configuration."""

    def __init__(self, config: Optional[ValidatorConfig] = None) -> None:
        self.config = config or ValidatorConfig()
        self.policy = self.config.policy()
        self._detector = EolDetector()
        self._checker = EolConsistencyChecker()
        self._scanner = CharsetScanner(self.policy)

    def validate(
        self,
        data: bytes,
        source: Optional[str] = None,
        listener: Optional[ScanListener] = None,
        correlation_id: Optional[str] = None,
    ) -> ValidationResult:
        """Validate a complete input buffer.

        Args:
            data: Complete input
            source: Description of the input for diagnostics
            listener: Optional receiver of scan events, e.g. a report writer
            correlation_id: Optional correlation ID, generated if omitted

        Returns:
            ValidationResult; EOL and charset problems are reported, not raised
        """
        correlation_id = correlation_id or str(uuid.uuid4())
        logger = get_logger(__name__, correlation_id, "validator")
        process = psutil.Process()
        memory_start = process.memory_info().rss
        start_time = time.perf_counter()

        result = ValidationResult(
            status=ValidationStatus.VALID,
            input_size=len(data),
            source=source,
            correlation_id=correlation_id,
        )
        logger.info(
            "Starting validation",
            extra={"source": source, "input_size": len(data)},
        )

        if data:
            self._run_pipeline(data, result, listener, logger)
        else:
            result.diagnostics.append(DiagnosticEntry(
                severity=DiagnosticSeverity.INFO,
                message="Empty input/file.",
                component="validator",
                correlation_id=correlation_id,
            ))

        result.performance = PerformanceMetrics(
            processing_time_ms=(time.perf_counter() - start_time) * MS_PER_SECOND,
            memory_used_bytes=max(0, process.memory_info().rss - memory_start),
            bytes_processed=len(data),
            lines_processed=_count_lines(data, result.eol_style),
        )
        logger.info(
            "Validation finished",
            extra={
                "status": result.status.name,
                "total_errors": result.total_errors,
                "processing_time_ms": result.performance.processing_time_ms,
            },
        )
        return result

    def _run_pipeline(
        self,
        data: bytes,
        result: ValidationResult,
        listener: Optional[ScanListener],
        logger: CorrelationLogger,
    ) -> None:
        style = self.config.eol_style
        if style is EolStyle.UNSPECIFIED:
            style = self._detector.detect(data)
            logger.debug("EOL style detected", extra={"eol_style": style.option_name})
        result.eol_style = style

        error_line = self._checker.validate(data, style)
        if error_line:
            result.status = ValidationStatus.EOL_MISMATCH
            result.eol_error_line = error_line
            result.diagnostics.append(DiagnosticEntry(
                severity=DiagnosticSeverity.ERROR,
                message=f"Unexpected end-of-line indicator in line {error_line}!",
                component="eol_checker",
                line=error_line,
                details={"expected": style.option_name},
                correlation_id=result.correlation_id,
            ))
            logger.warning(
                "EOL consistency check failed",
                extra={"line": error_line, "eol_style": style.option_name},
            )
            return

        report = self._scanner.scan(data, style, listener)
        result.report = report
        if report.total_errors:
            result.status = ValidationStatus.INVALID
            result.diagnostics.append(DiagnosticEntry(
                severity=DiagnosticSeverity.ERROR,
                message=f"{report.total_errors} character(s) outside the permitted set",
                component="charset_scanner",
                line=report.violations[0].line,
                correlation_id=result.correlation_id,
            ))

    def validate_file(
        self,
        file_path: Union[str, Path],
        listener: Optional[ScanListener] = None,
    ) -> ValidationResult:
        """Load and validate a file.

        Raises:
            InputUnavailableError: If the file cannot be read
            InputAllocationError: If the input does not fit in memory
        """
        data = load_file(file_path)
        return self.validate(data, source=str(file_path), listener=listener)

    def validate_stream(
        self,
        stream: BinaryIO,
        source: Optional[str] = None,
        listener: Optional[ScanListener] = None,
    ) -> ValidationResult:
        """Load and validate a binary stream such as ``sys.stdin.buffer``."""
        data = load_stream(stream, source)
        return self.validate(data, source=source, listener=listener)


def _count_lines(data: bytes, style: EolStyle) -> int:
    if not data:
        return 0
    if style is EolStyle.UNSPECIFIED:
        return 1
    return data.count(style.sequence) + 1


def validate_bytes(
    data: bytes,
    config: Optional[ValidatorConfig] = None,
    listener: Optional[ScanListener] = None,
) -> ValidationResult:
    """Validate an in-memory buffer.

    Examples:
        >>> validate_bytes(b"hello\\nworld\\n").status
        <ValidationStatus.VALID: 0>
        >>> validate_bytes(b"a\\r\\nb\\nc\\r\\n").eol_error_line
        2
    """
    return CharsetValidator(config).validate(data, listener=listener)


def validate_file(
    file_path: Union[str, Path],
    config: Optional[ValidatorConfig] = None,
    listener: Optional[ScanListener] = None,
) -> ValidationResult:
    """Validate a file.

    Raises:
        InputUnavailableError: If the file cannot be read
    """
    return CharsetValidator(config).validate_file(file_path, listener)


def validate_stream(
    stream: BinaryIO,
    config: Optional[ValidatorConfig] = None,
    source: Optional[str] = None,
    listener: Optional[ScanListener] = None,
) -> ValidationResult:
    """Validate a binary stream."""
    return CharsetValidator(config).validate_stream(stream, source, listener)


def _validate_file_task(file_path: str, config: ValidatorConfig) -> ValidationResult:
    try:
        return CharsetValidator(config).validate_file(file_path)
    except InputUnavailableError as e:
        return ValidationResult(
            status=e.status,
            source=file_path,
            diagnostics=[DiagnosticEntry(
                severity=DiagnosticSeverity.ERROR,
                message=str(e),
                component="input",
            )],
        )


def validate_files(
    paths: Sequence[Union[str, Path]],
    config: Optional[ValidatorConfig] = None,
    max_workers: Optional[int] = None,
) -> List[ValidationResult]:
    """Validate independent files, in parallel when worthwhile.

    Unreadable files yield results with status INPUT_UNAVAILABLE instead of
    aborting the batch.

    Returns:
        Results in the order of ``paths``
    """
    config = config or ValidatorConfig()
    file_names = [str(path) for path in paths]

    if len(file_names) <= 1 or max_workers == 1:
        return [_validate_file_task(name, config) for name in file_names]

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_validate_file_task, file_names, [config] * len(file_names)))
