"""Tests for EOL detection and consistency checking."""

import pytest

from charset_validator.character.eol import (
    EolConsistencyChecker,
    EolDetector,
    EolStyle,
    detect_eol,
    validate_eol,
)


class TestEolStyle:
    """Test the EolStyle enumeration."""

    def test_sequences(self):
        """Test that each style carries its terminator bytes."""
        assert EolStyle.CR.sequence == b"\r"
        assert EolStyle.LF.sequence == b"\n"
        assert EolStyle.CRLF.sequence == b"\r\n"
        assert EolStyle.UNSPECIFIED.sequence == b""

    def test_invalid_bytes(self):
        """Test the complementary byte signalling a foreign terminator."""
        assert EolStyle.CR.invalid_byte == 0x0A
        assert EolStyle.LF.invalid_byte == 0x0D
        assert EolStyle.CRLF.invalid_byte == 0x0A
        assert EolStyle.UNSPECIFIED.invalid_byte is None

    @pytest.mark.parametrize("name,expected", [
        ("LF", EolStyle.LF),
        ("crlf", EolStyle.CRLF),
        ("CR", EolStyle.CR),
        ("NA", EolStyle.UNSPECIFIED),
        (" lf ", EolStyle.LF),
    ])
    def test_from_name(self, name, expected):
        """Test parsing of option names."""
        assert EolStyle.from_name(name) is expected

    def test_cr_is_not_crlf(self):
        """Test that CR and CRLF are distinct styles."""
        assert EolStyle.from_name("CR") is not EolStyle.CRLF

    def test_from_name_rejects_unknown(self):
        """Test that unsupported names raise ValueError."""
        with pytest.raises(ValueError, match="EOL 'LFCR' not supported"):
            EolStyle.from_name("LFCR")

    def test_option_names(self):
        """Test names used in configuration output."""
        assert EolStyle.UNSPECIFIED.option_name == "NA"
        assert EolStyle.CRLF.option_name == "CRLF"

    def test_matches_at_crlf_requires_both_bytes(self):
        """Test that CRLF matches only a complete pair."""
        assert EolStyle.CRLF.matches_at(b"a\r\nb", 1)
        assert not EolStyle.CRLF.matches_at(b"a\rb", 1)
        assert not EolStyle.CRLF.matches_at(b"a\r", 1)
        assert not EolStyle.CRLF.matches_at(b"a\n", 1)

    def test_matches_at_unspecified_never_matches(self):
        """Test that the sentinel style has no terminator."""
        assert not EolStyle.UNSPECIFIED.matches_at(b"\n", 0)


class TestEolDetector:
    """Test EOL style detection."""

    @pytest.mark.parametrize("data,expected", [
        (b"hello\nworld\n", EolStyle.LF),
        (b"hello\r\nworld\r\n", EolStyle.CRLF),
        (b"hello\rworld\r", EolStyle.CR),
        (b"\n", EolStyle.LF),
        (b"\r\n", EolStyle.CRLF),
        (b"single line", EolStyle.UNSPECIFIED),
        (b"", EolStyle.UNSPECIFIED),
    ])
    def test_detect(self, data, expected):
        """Test detection for common inputs."""
        assert EolDetector().detect(data) is expected

    def test_first_terminator_wins(self):
        """Test that the first terminator decides, not the majority."""
        data = b"a\nb\r\nc\r\nd\r\ne\r\n"
        assert detect_eol(data) is EolStyle.LF

    def test_lone_trailing_cr_is_unspecified(self):
        """Test that an unconfirmed trailing CR does not resolve."""
        assert detect_eol(b"abc\r") is EolStyle.UNSPECIFIED

    def test_repeated_cr_before_lf_is_crlf(self):
        """Test that pending CR stays set across consecutive CRs."""
        assert detect_eol(b"a\r\r\nb") is EolStyle.CRLF

    def test_cr_followed_by_text_is_cr(self):
        """Test that a CR not followed by LF resolves to CR."""
        assert detect_eol(b"a\rb\r\n") is EolStyle.CR


class TestEolConsistencyChecker:
    """Test EOL consistency validation."""

    def test_unspecified_is_always_consistent(self):
        """Test that no EOL is checked for UNSPECIFIED."""
        checker = EolConsistencyChecker()
        assert checker.validate(b"a\rb\nc\r\n", EolStyle.UNSPECIFIED) == 0

    def test_lf_only_buffer(self):
        """Test an LF buffer against its detected style."""
        data = b"one\ntwo\nthree\n"
        assert validate_eol(data, detect_eol(data)) == 0

    def test_mixed_lf_and_cr_reports_first_offending_line(self):
        """Test that the line of the first foreign terminator is returned."""
        data = b"one\ntwo\nthree\rfour\nfive\r"
        assert validate_eol(data, EolStyle.LF) == 3

    def test_cr_style_rejects_lf(self):
        """Test that LF is foreign to CR files."""
        assert validate_eol(b"a\rb\rc\nd", EolStyle.CR) == 3

    def test_crlf_bare_lf(self):
        """Test that a bare LF breaks the CRLF expectation."""
        assert validate_eol(b"a\r\nb\nc\r\n", EolStyle.CRLF) == 2

    def test_crlf_bare_cr(self):
        """Test that a CR without LF breaks the CRLF expectation."""
        assert validate_eol(b"a\r\nb\rc\r\n", EolStyle.CRLF) == 2

    def test_crlf_trailing_cr(self):
        """Test that a CR at end of buffer is an incomplete CRLF."""
        assert validate_eol(b"a\r\nb\r", EolStyle.CRLF) == 2

    def test_crlf_consistent(self):
        """Test a well-formed CRLF buffer."""
        assert validate_eol(b"a\r\nb\r\n\r\nc", EolStyle.CRLF) == 0

    def test_foreign_terminator_on_first_line(self):
        """Test that line numbering starts at 1."""
        assert validate_eol(b"\ra\n", EolStyle.LF) == 1

    def test_empty_buffer(self):
        """Test that an empty buffer is consistent for every style."""
        for style in EolStyle:
            assert validate_eol(b"", style) == 0
