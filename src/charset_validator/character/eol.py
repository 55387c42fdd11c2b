"""End-of-line detection and consistency checking.

EOL handling is strict: the style is decided by the first terminator found in
the buffer and every other terminator must match it. The first foreign
terminator aborts the check and its line is reported.
"""

from enum import Enum
from typing import Optional

CR_BYTE = 0x0D
LF_BYTE = 0x0A


class EolStyle(Enum):
    """End-of-line convention, carrying its own separator bytes.

    ``UNSPECIFIED`` is a configuration sentinel asking for automatic detection.
    """

    UNSPECIFIED = b""
    CR = b"\r"
    LF = b"\n"
    CRLF = b"\r\n"

    @property
    def sequence(self) -> bytes:
        """Terminator bytes of the style."""
        return self.value

    @property
    def invalid_byte(self) -> Optional[int]:
        """Byte that signals a terminator of a different style."""
        if self is EolStyle.CR:
            return LF_BYTE
        if self is EolStyle.LF:
            return CR_BYTE
        if self is EolStyle.CRLF:
            return LF_BYTE
        return None

    @property
    def option_name(self) -> str:
        """Name used on the command line and in configuration files."""
        return "NA" if self is EolStyle.UNSPECIFIED else self.name

    @classmethod
    def from_name(cls, name: str) -> "EolStyle":
        """Parse an option name (``LF``, ``CRLF``, ``CR`` or ``NA``).

        Raises:
            ValueError: If the name is not a supported EOL style
        """
        normalized = name.strip().upper()
        if normalized in ("NA", "UNSPECIFIED"):
            return cls.UNSPECIFIED
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"EOL '{name}' not supported") from None

    def matches_at(self, data: bytes, position: int) -> bool:
        """Check whether the terminator of this style starts at ``position``."""
        if self is EolStyle.CR:
            return data[position] == CR_BYTE
        if self is EolStyle.LF:
            return data[position] == LF_BYTE
        if self is EolStyle.CRLF:
            return data[position] == CR_BYTE and data[position + 1:position + 2] == b"\n"
        return False


class EolDetector:
    """Infers the EOL convention from the first terminator in a buffer."""

    def detect(self, data: bytes) -> EolStyle:
        """Detect the EOL style of ``data``.

        A bare LF resolves to LF, a CR directly followed by LF to CRLF, and a
        CR followed by any other byte to CR. A buffer without a confirmed
        terminator, including one ending in a lone CR, is ``UNSPECIFIED``.

        Args:
            data: Complete input buffer

        Returns:
            Detected EolStyle
        """
        pending_cr = False
        for byte in data:
            if byte == LF_BYTE:
                return EolStyle.CRLF if pending_cr else EolStyle.LF
            if byte == CR_BYTE:
                pending_cr = True
            elif pending_cr:
                return EolStyle.CR
        return EolStyle.UNSPECIFIED


class EolConsistencyChecker:
    """Verifies that every line terminator matches one EOL style."""

    def validate(self, data: bytes, style: EolStyle) -> int:
        """Find the first line with a terminator foreign to ``style``.

        Args:
            data: Complete input buffer
            style: Expected EOL style

        Returns:
            1-based line number of the first mismatch, or 0 if consistent
        """
        if style is EolStyle.UNSPECIFIED:
            return 0

        expected = style.sequence
        invalid = style.invalid_byte
        line = 1
        position = 0
        size = len(data)

        while position < size:
            byte = data[position]
            if byte == expected[0]:
                if len(expected) == 1:
                    line += 1
                    position += 1
                elif data[position + 1:position + 2] == expected[1:]:
                    line += 1
                    position += 2
                else:
                    return line
            elif byte == invalid:
                return line
            else:
                position += 1

        return 0


def detect_eol(data: bytes) -> EolStyle:
    """Detect the EOL style of ``data``."""
    return EolDetector().detect(data)


def validate_eol(data: bytes, style: EolStyle) -> int:
    """Return the first line with an inconsistent terminator, or 0."""
    return EolConsistencyChecker().validate(data, style)
