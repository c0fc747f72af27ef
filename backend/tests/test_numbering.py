"""
Unit tests per identificativi, numeri fattura e scadenze.
"""

import datetime
import random
import re

from invoice_app.services.numbering import generate_id, generate_invoice_number, get_due_date


class TestGenerateId:

    def test_unique(self):
        assert len({generate_id() for _ in range(100)}) == 100


class TestInvoiceNumber:
    """Tests per il formato INV-YYMM-RRR."""

    def test_format(self):
        number = generate_invoice_number(datetime.date(2025, 3, 14))

        assert re.fullmatch(r"INV-2503-\d{3}", number)

    def test_suffix_is_zero_padded(self):
        class ZeroRng(random.Random):
            def randrange(self, *args, **kwargs):
                return 7

        assert generate_invoice_number(datetime.date(2024, 11, 1), rng=ZeroRng()) == "INV-2411-007"

    def test_deterministic_with_seeded_rng(self):
        today = datetime.date(2025, 1, 1)

        first = generate_invoice_number(today, rng=random.Random(42))
        second = generate_invoice_number(today, rng=random.Random(42))

        assert first == second


class TestDueDate:

    def test_default_thirty_days(self):
        assert get_due_date(datetime.date(2025, 1, 5)) == datetime.date(2025, 2, 4)

    def test_custom_terms(self):
        assert get_due_date(datetime.date(2025, 12, 20), days=15) == datetime.date(2026, 1, 4)
