from datetime import date
from decimal import Decimal

from tools.formatting import BAR_CHAR, bar, format_currency, format_date


class TestFormatCurrency:
    def test_grouping_and_rounding(self):
        assert format_currency(Decimal("12500.4")) == "₹12,500"
        assert format_currency(Decimal("0.5")) == "₹1"

    def test_negative(self):
        assert format_currency(-250, "$") == "-$250"

    def test_float_input(self):
        assert format_currency(1234567.0) == "₹1,234,567"


class TestFormatDate:
    def test_day_without_padding(self):
        assert format_date(date(2024, 3, 5)) == "5 Mar 2024"


class TestBar:
    def test_full_width(self):
        assert bar(100, 100, width=10) == BAR_CHAR * 10

    def test_small_values_still_visible(self):
        assert bar(1, 1000, width=10) == BAR_CHAR

    def test_zero_and_empty_scale(self):
        assert bar(0, 100) == ""
        assert bar(5, 0) == ""
