"""Configuration for charset validation.

ValidatorConfig is an immutable value that is built once (from defaults, a
JSON file or command-line switches) and passed explicitly into every
validation call.
"""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from charset_validator.character.eol import EolStyle
from charset_validator.character.policy import CharacterPolicy


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


_FLAG_FIELDS = (
    "allow_form_feed",
    "allow_vertical_tab",
    "allow_all_printable_ascii",
    "forbid_horizontal_tab",
    "verbose",
)


@dataclass(frozen=True)
class ValidatorConfig:
    """Complete configuration of one validation run.

    Attributes:
        eol_style: Expected EOL style; UNSPECIFIED requests detection
        allow_form_feed: Permit form feed
        allow_vertical_tab: Permit vertical tab
        allow_all_printable_ascii: Permit ``$``, ``@`` and backtick
        forbid_horizontal_tab: Reject horizontal tab
        verbose: Produce per-line diagnostics
    """

    eol_style: EolStyle = EolStyle.UNSPECIFIED
    allow_form_feed: bool = False
    allow_vertical_tab: bool = False
    allow_all_printable_ascii: bool = False
    forbid_horizontal_tab: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.eol_style, EolStyle):
            raise ConfigValidationError(
                f"eol_style must be an EolStyle, got {type(self.eol_style).__name__}",
                field_name="eol_style",
                suggestions=[f"Use one of {[s.option_name for s in EolStyle]}"],
            )
        for name in _FLAG_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigValidationError(
                    f"{name} must be a boolean", field_name=name
                )

    def policy(self) -> CharacterPolicy:
        """Derive the character policy described by this configuration."""
        return CharacterPolicy(
            allow_form_feed=self.allow_form_feed,
            allow_vertical_tab=self.allow_vertical_tab,
            allow_all_printable_ascii=self.allow_all_printable_ascii,
            forbid_horizontal_tab=self.forbid_horizontal_tab,
        )

    def override(self, **kwargs: Any) -> "ValidatorConfig":
        """Create a new configuration with specific overrides.

        ``eol_style`` may be given as an EolStyle or as an option name.

        Example:
            >>> config = ValidatorConfig().override(eol_style="LF", verbose=True)
        """
        if isinstance(kwargs.get("eol_style"), str):
            kwargs["eol_style"] = _parse_eol(kwargs["eol_style"])
        unknown = set(kwargs) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}"
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {"eol_style": self.eol_style.option_name}
        for name in _FLAG_FIELDS:
            result[name] = getattr(self, name)
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidatorConfig":
        """Create configuration from dictionary.

        Raises:
            ConfigValidationError: On unknown keys or invalid values
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration must be a JSON object")

        values = dict(data)
        if "eol_style" in values:
            eol = values["eol_style"]
            if not isinstance(eol, str):
                raise ConfigValidationError(
                    "eol_style must be a string", field_name="eol_style"
                )
            values["eol_style"] = _parse_eol(eol)

        unknown = set(values) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                suggestions=[f"Valid fields: {['eol_style', *_FLAG_FIELDS]}"],
            )
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "ValidatorConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ValidatorConfig":
        """Load configuration from a JSON file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(config_path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e
        return cls.from_json(text)

    # Preset factory methods
    @classmethod
    def strict(cls) -> "ValidatorConfig":
        """Basic source character set without horizontal tabs."""
        return cls(forbid_horizontal_tab=True)

    @classmethod
    def permissive(cls) -> "ValidatorConfig":
        """All printable ASCII plus form feed and vertical tab."""
        return cls(
            allow_form_feed=True,
            allow_vertical_tab=True,
            allow_all_printable_ascii=True,
        )


def _parse_eol(name: str) -> EolStyle:
    try:
        return EolStyle.from_name(name)
    except ValueError as e:
        raise ConfigValidationError(
            str(e),
            field_name="eol_style",
            suggestions=[f"Use one of {[s.option_name for s in EolStyle]}"],
        ) from e
