"""Unit tests for recordcheck.domain.parser.

Covers the documented examples, absent input, and the malformed inputs that
`parse` rejects (and `try_parse` turns into None).
"""

import logging

import pytest

from recordcheck.domain import (
    MalformedTokenError,
    Token,
    TokenOverflowError,
    format_token,
    parse,
    try_parse,
)

# pylint: disable=magic-value-comparison

VALID_TOKENS = [
    ("1511443755_2", Token(1511443755, "2")),
    ("151175_13521", Token(151175, "13521")),
    ("151144375_id", Token(151144375, "id")),
    ("15114437599_1", Token(15114437599, "1")),
    ("0_x", Token(0, "x")),
    ("-42_neg", Token(-42, "neg")),
    ("007_bond", Token(7, "bond")),
    ("12_", Token(12, "")),
    ("5_with space", Token(5, "with space")),
]

MALFORMED_TOKENS = [
    pytest.param("12345", "missing '_' separator", id="no-separator"),
    pytest.param("", "missing '_' separator", id="empty"),
    pytest.param("1_2_3", "expected one '_' separator, found 2", id="two-separators"),
    pytest.param("_id", "prefix '' is not an integer", id="empty-prefix"),
    pytest.param("abc_1", "prefix 'abc' is not an integer", id="alpha-prefix"),
    pytest.param(" 1_x", "prefix ' 1' is not an integer", id="leading-space"),
    pytest.param("+1_x", "prefix '+1' is not an integer", id="plus-sign"),
    pytest.param("1.5_x", "prefix '1.5' is not an integer", id="decimal"),
    pytest.param("١٢_x", "prefix '١٢' is not an integer", id="non-ascii-digits"),
]


class TestParse:
    """Tests for parse()."""

    @staticmethod
    def test_parse_valid_tokens():
        """The documented examples parse into the expected tokens."""
        assert parse("1511443755_2") == Token(1511443755, "2")
        assert parse("151175_13521") == Token(151175, "13521")
        assert parse("151144375_id") == Token(151144375, "id")
        assert parse("15114437599_1") == Token(15114437599, "1")
        assert parse(None) is None

    @staticmethod
    def test_multi_digit_remainder_is_not_truncated():
        """The whole remainder is kept, not just its first character."""
        token = parse("15114437599_12")
        assert token == Token(15114437599, "12")
        assert token != Token(15114437599, "1")

    @staticmethod
    @pytest.mark.parametrize(("value", "expected"), VALID_TOKENS)
    def test_parse_valid_token(value, expected):
        """Each valid token string parses into its Token."""
        assert parse(value) == expected

    @staticmethod
    def test_absent_input_gives_absent_result():
        """None is not an error: it parses to None."""
        assert parse(None) is None

    @staticmethod
    @pytest.mark.parametrize(("value", "reason"), MALFORMED_TOKENS)
    def test_malformed_token_raises(value, reason):
        """Present input that breaks the format raises MalformedTokenError."""
        with pytest.raises(MalformedTokenError) as exc_info:
            parse(value)
        assert exc_info.value.value == value
        assert exc_info.value.reason == reason

    @staticmethod
    @pytest.mark.parametrize("number", [2**63 - 1, -(2**63)])
    def test_64_bit_bounds_are_accepted(number):
        """The extremes of the signed 64-bit range parse without loss."""
        assert parse(f"{number}_edge") == Token(number, "edge")

    @staticmethod
    @pytest.mark.parametrize("number", [2**63, -(2**63) - 1, 10**30])
    def test_overflow_is_rejected_not_truncated(number):
        """Numbers outside the 64-bit range raise TokenOverflowError."""
        with pytest.raises(TokenOverflowError) as exc_info:
            parse(f"{number}_x")
        assert exc_info.value.number == number

    @staticmethod
    def test_successful_parse_logs_at_debug(caplog):
        """A successful parse leaves a DEBUG record naming the input."""
        with caplog.at_level(logging.DEBUG, logger="recordcheck.domain.parser"):
            parse("151144375_id")
        assert "'151144375_id'" in caplog.text


class TestTryParse:
    """Tests for try_parse()."""

    @staticmethod
    @pytest.mark.parametrize(("value", "expected"), VALID_TOKENS)
    def test_valid_tokens_match_parse(value, expected):
        """For valid input try_parse behaves like parse."""
        assert try_parse(value) == expected

    @staticmethod
    def test_absent_input():
        """None yields None."""
        assert try_parse(None) is None

    @staticmethod
    @pytest.mark.parametrize(
        "value", ["12345", "1_2_3", "abc_1", f"{2**64}_x"], ids=str
    )
    def test_malformed_input_gives_none(value):
        """Malformed input yields None instead of raising."""
        assert try_parse(value) is None

    @staticmethod
    def test_rejection_is_logged_at_debug(caplog):
        """The swallowed error is still visible in DEBUG logs."""
        with caplog.at_level(logging.DEBUG, logger="recordcheck.domain.parser"):
            try_parse("12345")
        assert "Rejected token" in caplog.text
        assert "missing '_' separator" in caplog.text


class TestFormatToken:
    """Tests for format_token()."""

    @staticmethod
    @pytest.mark.parametrize(("value", "token"), VALID_TOKENS[:5])
    def test_format_is_inverse_of_parse(value, token):
        """Formatting a parsed canonical token gives back the input string."""
        assert format_token(token) == value

    @staticmethod
    def test_format_drops_leading_zeros():
        """The number is formatted canonically, so '007' is not restored."""
        assert format_token(parse("007_bond")) == "7_bond"
