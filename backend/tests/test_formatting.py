"""
Unit tests per la formattazione di importi e date.
"""

import datetime

from invoice_app.services.formatting import format_currency, format_date


class TestFormatCurrency:

    def test_thousands_and_decimals(self):
        assert format_currency(1234.5) == "$1,234.50"

    def test_negative(self):
        assert format_currency(-10) == "-$10.00"

    def test_custom_symbol(self):
        assert format_currency(99.999, "€") == "€100.00"


class TestFormatDate:

    def test_date(self):
        assert format_date(datetime.date(2025, 1, 5)) == "Jan 5, 2025"

    def test_iso_string(self):
        assert format_date("2024-12-31T23:00:00Z") == "Dec 31, 2024"
