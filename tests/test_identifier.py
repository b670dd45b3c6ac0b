# SPDX-License-Identifier: MIT
"""Unit tests for identifier classification and ordering."""

import pytest

from strict_semver import (
    Identifier,
    InvalidIdentifierError,
    InvalidVersionError,
    compare_identifiers,
    join_identifiers,
    parse_identifier,
    parse_identifiers,
)


class TestParseIdentifier:
    """Tests for parse_identifier function."""

    def test_numeric(self):
        """Test that digits-only tokens become numeric identifiers."""
        identifier = parse_identifier("11")
        assert identifier.value == 11
        assert identifier.is_numeric is True

    def test_zero(self):
        """Test that a single zero is numeric."""
        assert parse_identifier("0") == Identifier(0)

    def test_textual(self):
        """Test that alphanumeric tokens become textual identifiers."""
        identifier = parse_identifier("alpha")
        assert identifier.value == "alpha"
        assert identifier.is_numeric is False

    def test_textual_with_digits_and_hyphens(self):
        """Test tokens mixing digits, letters and hyphens."""
        assert parse_identifier("x-7-z").value == "x-7-z"
        assert parse_identifier("0abc").value == "0abc"
        assert parse_identifier("--").value == "--"

    def test_leading_zero_rejected_by_default(self):
        """Test that leading zeros are rejected in pre-release context."""
        with pytest.raises(InvalidIdentifierError):
            parse_identifier("01")

    def test_leading_zero_allowed_is_textual(self):
        """Test that leading zeros fall through to textual when allowed."""
        identifier = parse_identifier("007", allow_leading_zeros=True)
        assert identifier == Identifier("007")
        assert identifier.is_numeric is False

    def test_empty_rejected(self):
        """Test that an empty token is rejected."""
        with pytest.raises(InvalidIdentifierError):
            parse_identifier("")
        with pytest.raises(InvalidIdentifierError):
            parse_identifier("", allow_leading_zeros=True)

    @pytest.mark.parametrize("token", ["a_b", "a b", "é", "a+b", "²", "١"])
    def test_invalid_characters_rejected(self, token):
        """Test that characters outside [0-9A-Za-z-] are rejected."""
        with pytest.raises(InvalidIdentifierError):
            parse_identifier(token, allow_leading_zeros=True)

    def test_error_is_invalid_version_error(self):
        """Test that identifier errors can be caught as version errors."""
        with pytest.raises(InvalidVersionError) as exc_info:
            parse_identifier("a_b")
        assert exc_info.value.identifier == "a_b"


class TestParseIdentifiers:
    """Tests for parse_identifiers function."""

    def test_none_is_empty(self):
        """Test that None yields no identifiers."""
        assert parse_identifiers(None) == ()

    def test_empty_string_is_empty(self):
        """Test that an empty string yields no identifiers."""
        assert parse_identifiers("") == ()

    def test_order_preserved(self):
        """Test that identifiers keep their input order."""
        assert parse_identifiers("beta.2.x") == (
            Identifier("beta"),
            Identifier(2),
            Identifier("x"),
        )

    @pytest.mark.parametrize("text", [".", "a.", ".a", "a..b"])
    def test_empty_token_rejected(self, text):
        """Test that any empty dot-separated token rejects the whole field."""
        with pytest.raises(InvalidIdentifierError):
            parse_identifiers(text)

    def test_leading_zero_rejects_whole_field(self):
        """Test that one bad token rejects the whole pre-release field."""
        with pytest.raises(InvalidIdentifierError):
            parse_identifiers("alpha.01")

    def test_build_policy_allows_leading_zeros(self):
        """Test that build metadata keeps leading-zero tokens as text."""
        assert parse_identifiers("20170904.001", allow_leading_zeros=True) == (
            Identifier(20170904),
            Identifier("001"),
        )

    def test_non_string_rejected(self):
        """Test that non-string input is rejected."""
        with pytest.raises(InvalidIdentifierError):
            parse_identifiers(123)  # type: ignore


class TestIdentifierValue:
    """Tests for constructing Identifier directly."""

    def test_negative_rejected(self):
        """Test that negative numbers are rejected."""
        with pytest.raises(InvalidIdentifierError):
            Identifier(-1)

    def test_bool_rejected(self):
        """Test that bools are not accepted as numbers."""
        with pytest.raises(InvalidIdentifierError):
            Identifier(True)  # type: ignore

    def test_canonical_digits_must_be_int(self):
        """Test that "5" must be spelled as the int 5."""
        with pytest.raises(InvalidIdentifierError):
            Identifier("5")
        with pytest.raises(InvalidIdentifierError):
            Identifier("0")

    def test_empty_string_rejected(self):
        """Test that empty text is rejected."""
        with pytest.raises(InvalidIdentifierError):
            Identifier("")

    def test_other_types_rejected(self):
        """Test that other types are rejected."""
        with pytest.raises(InvalidIdentifierError):
            Identifier(1.5)  # type: ignore

    def test_str(self):
        """Test identifier rendering."""
        assert str(Identifier(42)) == "42"
        assert str(Identifier("rc")) == "rc"
        assert str(Identifier("01")) == "01"

    def test_frozen(self):
        """Test that Identifier is immutable."""
        identifier = Identifier("alpha")
        with pytest.raises(AttributeError):
            identifier.value = "beta"  # type: ignore

    def test_hashable(self):
        """Test that equal identifiers hash equally."""
        assert len({Identifier(1), Identifier(1), Identifier("a")}) == 2


class TestIdentifierOrdering:
    """Tests for identifier precedence."""

    def test_numeric_below_textual(self):
        """Test that numeric identifiers sort before any textual one."""
        assert Identifier(999999) < Identifier("-")
        assert Identifier(0) < Identifier("a")
        assert Identifier("A") > Identifier(10**30)

    def test_numeric_compared_numerically(self):
        """Test that 2 < 11 numerically."""
        assert Identifier(2) < Identifier(11)

    def test_textual_compared_in_ascii_order(self):
        """Test ASCII ordering: '-' < digits < uppercase < lowercase."""
        assert Identifier("-") < Identifier("0a")
        assert Identifier("0a") < Identifier("A")
        assert Identifier("Z") < Identifier("a")
        assert Identifier("alpha") < Identifier("beta")
        assert Identifier("11a") < Identifier("2a")

    def test_cross_variant_never_equal(self):
        """Test that numeric and textual identifiers are never equal."""
        assert Identifier(1) != Identifier("01")

    def test_compare_identifiers(self):
        """Test the three-way comparison helper."""
        assert compare_identifiers(Identifier(1), Identifier(2)) == -1
        assert compare_identifiers(Identifier("b"), Identifier("a")) == 1
        assert compare_identifiers(Identifier("a"), Identifier("a")) == 0
        assert compare_identifiers(Identifier("a"), Identifier(1)) == 1

    def test_not_comparable_with_other_types(self):
        """Test that ordering against other types raises TypeError."""
        with pytest.raises(TypeError):
            Identifier(1) < 2  # noqa: B015


class TestJoinIdentifiers:
    """Tests for join_identifiers function."""

    def test_empty(self):
        """Test that no identifiers render as None."""
        assert join_identifiers(()) is None

    def test_joined(self):
        """Test dot joining."""
        assert join_identifiers(parse_identifiers("rc.1")) == "rc.1"
