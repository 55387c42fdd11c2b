"""Tests for the character policy."""

import dataclasses

import pytest

from charset_validator.character.policy import (
    CHAR_CODE_CR,
    CHAR_CODE_LF,
    TABLE_SIZE,
    CharacterPolicy,
)


class TestDefaultPolicy:
    """Test the basic source character set."""

    def test_printable_ascii_allowed(self):
        """Test that ordinary printable characters are permitted."""
        policy = CharacterPolicy()
        for char in b"azAZ09 {}#;\\~":
            assert policy.is_allowed(char)

    @pytest.mark.parametrize("byte", [0x24, 0x40, 0x60])
    def test_extended_printable_rejected(self, byte):
        """Test that $, @ and backtick are rejected by default."""
        assert not CharacterPolicy().is_allowed(byte)

    def test_horizontal_tab_allowed(self):
        """Test that HT is permitted by default."""
        assert CharacterPolicy().is_allowed(0x09)

    @pytest.mark.parametrize("byte", [0x00, 0x01, 0x0B, 0x0C, 0x1B, 0x1F])
    def test_control_characters_rejected(self, byte):
        """Test that other control codes are rejected."""
        assert not CharacterPolicy().is_allowed(byte)

    @pytest.mark.parametrize("byte", [0x7F, 0x80, 0xC3, 0xFF])
    def test_high_bytes_rejected(self, byte):
        """Test that values of 127 and above are always rejected."""
        policy = CharacterPolicy(
            allow_form_feed=True,
            allow_vertical_tab=True,
            allow_all_printable_ascii=True,
        )
        assert not policy.is_allowed(byte)

    def test_table_size(self):
        """Test that the table covers 0..126."""
        assert len(CharacterPolicy().table) == TABLE_SIZE == 127


class TestPolicyOverrides:
    """Test the four policy switches."""

    def test_allow_form_feed(self):
        assert CharacterPolicy(allow_form_feed=True).is_allowed(0x0C)

    def test_allow_vertical_tab(self):
        assert CharacterPolicy(allow_vertical_tab=True).is_allowed(0x0B)

    def test_allow_all_printable_ascii(self):
        """Test that $, @ and backtick are unlocked together."""
        policy = CharacterPolicy(allow_all_printable_ascii=True)
        assert all(policy.is_allowed(byte) for byte in b"$@`")

    def test_forbid_horizontal_tab(self):
        assert not CharacterPolicy(forbid_horizontal_tab=True).is_allowed(0x09)

    def test_switches_are_independent(self):
        """Test that one switch does not affect the others."""
        policy = CharacterPolicy(allow_form_feed=True)
        assert not policy.is_allowed(0x0B)
        assert not policy.is_allowed(0x24)
        assert policy.is_allowed(0x09)


class TestStructuralCharacters:
    """Test that LF and CR are never policy violations."""

    @pytest.mark.parametrize("kwargs", [
        {},
        {"forbid_horizontal_tab": True},
        {"allow_form_feed": True, "allow_vertical_tab": True},
    ])
    def test_eol_bytes_always_allowed(self, kwargs):
        policy = CharacterPolicy(**kwargs)
        assert policy.is_allowed(CHAR_CODE_LF)
        assert policy.is_allowed(CHAR_CODE_CR)


class TestPolicyImmutability:
    """Test that policies are immutable values."""

    def test_frozen(self):
        policy = CharacterPolicy()
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.allow_form_feed = True

    def test_equality(self):
        assert CharacterPolicy(allow_form_feed=True) == CharacterPolicy(allow_form_feed=True)
        assert CharacterPolicy() != CharacterPolicy(forbid_horizontal_tab=True)

    def test_allowed_bytes(self):
        """Test the listing of permitted bytes."""
        allowed = CharacterPolicy().allowed_bytes()
        assert b"\t" in allowed
        assert b"$" not in allowed
        assert allowed == bytes(sorted(allowed))
