"""Main CLI entry point for the ``cvc`` command-line tool.

Validates files or standard input against the basic source character set and
an end-of-line convention. The exit code is the ValidationStatus of the run.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from charset_validator import __version__
from charset_validator.api import (
    CharsetValidator,
    InputAllocationError,
    InputUnavailableError,
    ValidationResult,
    ValidatorError,
    load_file,
    load_stream,
)
from charset_validator.character import EolStyle
from charset_validator.shared import (
    ConfigError,
    DiagnosticEntry,
    DiagnosticSeverity,
    ValidationStatus,
    ValidatorConfig,
    configure_logging,
    get_logger,
)

from .output import ReportWriter, format_results_json

STDIN_SOURCE = "<stdin>"
PROJECT_URL = "https://github.com/piscilus/cvc"

# Command-line switches and the configuration fields they enable
POLICY_SWITCHES = {
    "ff": "allow_form_feed",
    "vt": "allow_vertical_tab",
    "apa": "allow_all_printable_ascii",
    "noht": "forbid_horizontal_tab",
    "verbose": "verbose",
}


class CLIArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with the invalid-parameter status on errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(
            int(ValidationStatus.INVALID_CONFIGURATION),
            f"Error: {message}\n",
        )


def _eol_style(value: str) -> EolStyle:
    try:
        return EolStyle.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"{e}!") from e


def _exit_code_epilog() -> str:
    lines = ["With no FILE, read standard input.", "", "exit codes:"]
    for status in ValidationStatus:
        lines.append(f"  {int(status)}: {status.description}")
    lines.extend(["", f"Get latest version from: {PROJECT_URL}"])
    return "\n".join(lines)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = CLIArgumentParser(
        prog="cvc",
        description="Character Set Validator for C/C++ Source Code.",
        epilog=_exit_code_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--file", "-f",
        action="append",
        type=Path,
        metavar="FILE",
        help="Specify a file (default: n/a); may be repeated"
    )
    parser.add_argument(
        "--eol", "-e",
        type=_eol_style,
        metavar="LF/CRLF/CR/NA",
        help="End-of-line indicator (default: NA)"
    )
    parser.add_argument(
        "--ff",
        action="store_true",
        help="Permit form feed character"
    )
    parser.add_argument(
        "--vt",
        action="store_true",
        help="Permit vertical tab character"
    )
    parser.add_argument(
        "--apa",
        action="store_true",
        help="Permit all printable ASCII characters"
    )
    parser.add_argument(
        "--noht",
        action="store_true",
        help="Forbid horizontal tab character"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON configuration file; command-line switches take precedence"
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    parser.add_argument(
        "--no-line-separators",
        action="store_true",
        help="Do not end a verbose row when its line ends"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for messages on stderr (default: WARNING)"
    )

    return parser


def build_config(args: argparse.Namespace) -> ValidatorConfig:
    """Combine the optional configuration file with command-line switches.

    Raises:
        ConfigError: If the configuration file is unreadable or invalid
    """
    config = ValidatorConfig.from_file(args.config) if args.config else ValidatorConfig()

    overrides = {}
    if args.eol is not None:
        overrides["eol_style"] = args.eol
    for switch, field_name in POLICY_SWITCHES.items():
        if getattr(args, switch):
            overrides[field_name] = True

    return config.override(**overrides) if overrides else config


def _print_text_result(result: ValidationResult, verbose: bool) -> None:
    if result.is_empty:
        if verbose:
            print("Empty input/file.")
        return

    if result.status == ValidationStatus.EOL_MISMATCH:
        if verbose:
            print(
                f"Unexpected end-of-line indicator in line {result.eol_error_line}!",
                file=sys.stderr,
            )
        return

    print(result.total_errors)


def _load_failure_result(error: ValidatorError, source: str) -> ValidationResult:
    return ValidationResult(
        status=error.status,
        source=source,
        diagnostics=[DiagnosticEntry(
            severity=DiagnosticSeverity.ERROR,
            message=str(error),
            component="input",
        )],
    )


def run(args: argparse.Namespace, config: ValidatorConfig) -> int:
    """Validate every requested input and print the results.

    Inputs that cannot be loaded are reported on stderr and, with JSON output,
    appear in the result list with their failure status.
    """
    logger = get_logger(__name__, None, "cli")
    validator = CharsetValidator(config)
    text_output = args.format == "text"
    verbose_text = config.verbose and text_output

    results: List[ValidationResult] = []
    exit_code = int(ValidationStatus.VALID)

    for file_path in args.file or [None]:
        source = STDIN_SOURCE if file_path is None else str(file_path)

        try:
            if file_path is None:
                data = load_stream(sys.stdin.buffer, source)
            else:
                data = load_file(file_path)
        except InputUnavailableError as e:
            print(str(e), file=sys.stderr)
            result = _load_failure_result(e, source)
        except InputAllocationError as e:
            logger.exception("Input could not be loaded", extra={"file": source})
            print(str(e), file=sys.stderr)
            result = _load_failure_result(e, source)
        else:
            if file_path is not None and verbose_text:
                print(f"file: {file_path}")

            writer = None
            if verbose_text:
                writer = ReportWriter(sys.stdout, line_separators=not args.no_line_separators)

            result = validator.validate(data, source=source, listener=writer)

            if writer is not None:
                writer.finish()
            if text_output:
                _print_text_result(result, config.verbose)

        results.append(result)
        exit_code = max(exit_code, int(result.status))

    if not text_output:
        print(format_results_json(results))

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return int(ValidationStatus.INVALID_CONFIGURATION)

    try:
        return run(args, config)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
