"""Unit tests for input validators."""

from decimal import Decimal

import pytest

from affiliates.validators import (
    validate_amount,
    validate_email,
    validate_name,
    validate_password,
)


class TestValidateEmail:
    """Test email validation."""

    @pytest.mark.parametrize(
        "email",
        ["user@example.com", "first.last+tag@sub.example.org", "  padded@example.com  "],
    )
    def test_valid(self, email):
        """Well-formed addresses pass."""
        assert validate_email(email) == (True, None)

    @pytest.mark.parametrize(
        "email,error",
        [
            ("", "Email is empty"),
            ("invalid", "Email must contain '@'"),
            ("a@b@example.com", "Email must contain exactly one '@'"),
            ("user@localhost", "Email domain must contain a dot (.)"),
            ("user@example..com", "Email domain has invalid structure"),
        ],
    )
    def test_invalid(self, email, error):
        """Malformed addresses fail with a reason."""
        assert validate_email(email) == (False, error)


class TestValidatePassword:
    """Test password rules."""

    def test_minimum_length(self):
        """Eight characters is enough."""
        assert validate_password("12345678") == (True, None)

    def test_too_short(self):
        """Seven characters is not."""
        is_valid, error = validate_password("1234567")
        assert is_valid is False
        assert "at least 8" in error

    def test_empty(self):
        """Empty password fails."""
        assert validate_password("")[0] is False

    def test_over_bcrypt_limit(self):
        """More than 72 bytes would be silently truncated by bcrypt."""
        assert validate_password("x" * 73)[0] is False


class TestValidateName:
    """Test display name rules."""

    def test_valid(self):
        """Normal name passes."""
        assert validate_name("Jane Doe") == (True, None)

    def test_blank(self):
        """Whitespace only fails."""
        assert validate_name("   ") == (False, "Name is empty")


class TestValidateAmount:
    """Test sale amount validation."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("100.50", Decimal("100.50")),
            (Decimal("0.01"), Decimal("0.01")),
            (250, Decimal("250")),
            (19.99, Decimal("19.99")),
            ("10,5", Decimal("10.5")),
        ],
    )
    def test_valid(self, raw, expected):
        """Positive finite amounts parse to Decimal."""
        assert validate_amount(raw) == (True, expected, None)

    @pytest.mark.parametrize(
        "raw", ["0", "-10", "abc", "", None, "NaN", "Infinity", True, "1.123456789"]
    )
    def test_invalid(self, raw):
        """Zero, negatives, junk and non-finite values fail."""
        is_valid, value, error = validate_amount(raw)
        assert is_valid is False
        assert value is None
        assert error
