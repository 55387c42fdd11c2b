#!/usr/bin/env python3
"""
Quick Start Guide for the Character Set Validator.

Shows the three levels of the API: the simple validate_bytes() function, a
configured CharsetValidator, and the individual engine components.
"""

import io

from charset_validator import CharsetValidator, ValidatorConfig, validate_bytes
from charset_validator.character import (
    CharacterPolicy,
    EolConsistencyChecker,
    EolDetector,
    EolStyle,
    scan,
)
from charset_validator.cli.output import ReportWriter

SAMPLE = b"#include <stdio.h>\n\nint main(void)\n{\n    puts(\"$HOME @ work\");\n}\n"


def simple_validation():
    """Level 1: validate a buffer with the default policy."""
    print("Level 1 - validate_bytes()")
    print("-" * 30)

    result = validate_bytes(SAMPLE)
    print(f"status: {result.status.name}, EOL: {result.eol_style.option_name}")
    for violation in result.report.violations:
        print(f"  line {violation.line}: 0x{violation.byte:02X} ({violation.char})")


def configured_validation():
    """Level 2: reuse one validator with a custom configuration."""
    print("\nLevel 2 - CharsetValidator")
    print("-" * 30)

    config = ValidatorConfig(eol_style=EolStyle.LF, allow_all_printable_ascii=True, verbose=True)
    validator = CharsetValidator(config)

    writer = ReportWriter(io.StringIO())
    result = validator.validate(SAMPLE, source="sample.c", listener=writer)
    print(f"status: {result.status.name}, errors: {result.total_errors}")
    print(f"configuration: {config.to_json(indent=None)}")


def engine_components():
    """Level 3: drive detection, consistency check and scan by hand."""
    print("\nLevel 3 - engine components")
    print("-" * 30)

    data = b"a = 1;\r\nb = 2;\nc = 3;\r\n"
    style = EolDetector().detect(data)
    line = EolConsistencyChecker().validate(data, style)
    print(f"detected {style.option_name}, first inconsistent line: {line}")

    report = scan(b"\tx = 1;\n", EolStyle.LF, CharacterPolicy(forbid_horizontal_tab=True))
    print(f"tab forbidden -> {report.total_errors} error(s)")


if __name__ == "__main__":
    simple_validation()
    configured_validation()
    engine_components()
