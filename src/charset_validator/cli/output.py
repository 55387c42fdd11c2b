"""Output formatting for the command-line tool."""

import json
from typing import List, TextIO

from charset_validator.api import ValidationResult
from charset_validator.character import ScanListener, Violation


class ReportWriter(ScanListener):
    """Writes violations as they are found, one row per offending line.

    Rows look like ``line 3: 0x40 (@) 0x24 ($)``. A row is terminated when the
    scan crosses the end of its line; with ``line_separators`` disabled rows
    are not terminated there and run together on one output line.
    """

    def __init__(self, stream: TextIO, line_separators: bool = True) -> None:
        self.stream = stream
        self.line_separators = line_separators
        self._current_line = 0
        self._row_open = False

    def violation(self, violation: Violation) -> None:
        if violation.line != self._current_line:
            self.stream.write(f"line {violation.line}:")
            self._current_line = violation.line
            self._row_open = True
        self.stream.write(f" 0x{violation.byte:02X} ({violation.char})")

    def line_end(self, line: int, reported: bool) -> None:
        if reported and self.line_separators:
            self.stream.write("\n")
            self._row_open = False

    def finish(self) -> None:
        """Terminate a row left open by a violation on the last line."""
        if self._row_open:
            self.stream.write("\n")
            self._row_open = False


def format_results_json(results: List[ValidationResult]) -> str:
    """Format validation results as a JSON array."""
    return json.dumps([result.to_dict() for result in results], indent=2)
