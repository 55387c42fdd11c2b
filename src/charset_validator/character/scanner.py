"""Single-pass character set scanner with diagnostic accumulation.

The scanner walks a complete buffer once, skips the line terminators of the
chosen EOL style and checks every other byte against a CharacterPolicy.
Presentation concerns are kept out of the scan: a ScanListener receives
violation and line-end events and may render them however it likes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from charset_validator.shared.logging import get_logger

from .eol import EolStyle
from .policy import CharacterPolicy

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E


def display_char(byte: int) -> str:
    """Render a byte for diagnostics, escaping anything non-printable."""
    if PRINTABLE_MIN <= byte <= PRINTABLE_MAX:
        return chr(byte)
    return f"\\x{byte:02x}"


@dataclass(frozen=True)
class Violation:
    """A byte that is not permitted by the policy.

    Attributes:
        line: 1-based line number
        byte: Offending byte value (0-255)
        char: Display form of the byte
    """

    line: int
    byte: int
    char: str = ""

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError("Violation line must be >= 1")
        if not 0 <= self.byte <= 0xFF:
            raise ValueError(f"Violation byte must be between 0 and 255, got {self.byte}")
        if not self.char:
            object.__setattr__(self, "char", display_char(self.byte))

    def to_dict(self) -> Dict[str, Any]:
        return {"line": self.line, "byte": self.byte, "char": self.char}


@dataclass(frozen=True)
class DiagnosticReport:
    """Ordered violations and the total error count of one scan."""

    violations: Tuple[Violation, ...] = ()
    total_errors: int = 0

    @property
    def is_valid(self) -> bool:
        """True when no violation was found."""
        return self.total_errors == 0

    def violations_by_line(self) -> Dict[int, List[Violation]]:
        """Group violations by line, preserving scan order."""
        grouped: Dict[int, List[Violation]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.line, []).append(violation)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_errors": self.total_errors,
            "violations": [violation.to_dict() for violation in self.violations],
        }


@dataclass
class _ReportBuilder:
    violations: List[Violation] = field(default_factory=list)
    total_errors: int = 0

    def add(self, violation: Violation) -> None:
        self.violations.append(violation)
        self.total_errors += 1

    def build(self) -> DiagnosticReport:
        return DiagnosticReport(tuple(self.violations), self.total_errors)


class ScanListener:
    """Receiver of scan events; the default implementation ignores them."""

    def violation(self, violation: Violation) -> None:
        """Called for every violation in scan order."""

    def line_end(self, line: int, reported: bool) -> None:
        """Called at every line terminator.

        Args:
            line: Line that is being left
            reported: True if the most recent violation was on this line
        """


class CharsetScanner:
    """Checks every non-EOL byte of a buffer against a CharacterPolicy."""

    def __init__(self, policy: Optional[CharacterPolicy] = None) -> None:
        self.policy = policy or CharacterPolicy()
        self.logger = get_logger(__name__, None, "charset_scanner")

    def scan(
        self,
        data: bytes,
        style: EolStyle,
        listener: Optional[ScanListener] = None,
    ) -> DiagnosticReport:
        """Scan ``data`` and collect policy violations.

        Args:
            data: Complete input buffer
            style: EOL style whose terminators delimit lines
            listener: Optional receiver of violation and line-end events

        Returns:
            DiagnosticReport with violations in buffer order
        """
        builder = _ReportBuilder()
        table = self.policy.table
        eol_length = len(style.sequence)
        line = 1
        last_reported_line = 0
        position = 0
        size = len(data)
        trace = self.logger.is_enabled_for(logging.DEBUG)

        while position < size:
            if eol_length and style.matches_at(data, position):
                if listener is not None:
                    listener.line_end(line, last_reported_line == line)
                line += 1
                position += eol_length
                continue

            byte = data[position]
            if byte >= len(table) or not table[byte]:
                violation = Violation(line, byte)
                builder.add(violation)
                last_reported_line = line
                if trace:
                    self.logger.debug(
                        "Character violation",
                        extra={"line": line, "byte": byte},
                    )
                if listener is not None:
                    listener.violation(violation)
            position += 1

        report = builder.build()
        self.logger.debug(
            "Charset scan finished",
            extra={"lines": line, "total_errors": report.total_errors},
        )
        return report


def scan(
    data: bytes,
    style: EolStyle,
    policy: Optional[CharacterPolicy] = None,
    listener: Optional[ScanListener] = None,
) -> DiagnosticReport:
    """Scan ``data`` with ``policy`` and return the diagnostic report."""
    return CharsetScanner(policy).scan(data, style, listener)
