"""Unit tests for commission arithmetic."""

from decimal import Decimal

import pytest

from affiliates.services.accrual import calculate_commission


class TestCalculateCommission:
    """Test commission = amount x rate / 100, rounded to cents."""

    @pytest.mark.parametrize(
        "amount,rate,expected",
        [
            (Decimal("100"), Decimal("20"), Decimal("20.00")),
            (Decimal("100"), Decimal("25"), Decimal("25.00")),
            (Decimal("100"), Decimal("30"), Decimal("30.00")),
            (Decimal("2500"), Decimal("20"), Decimal("500.00")),
        ],
    )
    def test_exact_amounts(self, amount, rate, expected):
        """Whole-cent results are exact."""
        assert calculate_commission(amount, rate) == expected

    def test_rounds_half_up(self):
        """Half a cent rounds up."""
        # 0.10 * 25% = 0.025
        assert calculate_commission(Decimal("0.10"), Decimal("25")) == Decimal("0.03")

    def test_rounds_down_below_half(self):
        """10.05 * 25% = 2.5125 -> 2.51."""
        assert calculate_commission(Decimal("10.05"), Decimal("25")) == Decimal("2.51")

    def test_result_has_two_places(self):
        """Commission is always quantised to cents."""
        result = calculate_commission(Decimal("33.333"), Decimal("20"))
        assert result.as_tuple().exponent == -2
