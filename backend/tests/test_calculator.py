"""
Unit tests per il calcolo dei totali fattura.
"""

import pytest

from invoice_app.schemas.invoice import InvoiceItem
from invoice_app.services.calculator import calculate_invoice, line_total


def _item(quantity, price):
    return InvoiceItem(id="x", product_id="p", quantity=quantity, price=price,
                       total=line_total(quantity, price))


class TestLineTotal:
    """Tests per il totale di riga."""

    def test_quantity_times_price(self):
        assert line_total(2, 100) == 200

    def test_fractional_quantity(self):
        assert line_total(1.5, 120) == pytest.approx(180)


class TestCalculateInvoice:
    """Tests per subtotale, imposta, sconto e totale."""

    def test_tax_and_discount(self):
        """2 x 100 con imposta 10% e sconto 5% → 210."""
        totals = calculate_invoice([_item(2, 100)], tax=10, discount=5)

        assert totals.subtotal == 200
        assert totals.tax_amount == 20
        assert totals.discount_amount == 10
        assert totals.total == 210

    def test_empty_items_all_zero(self):
        totals = calculate_invoice([], tax=22, discount=10)

        assert totals.subtotal == 0
        assert totals.tax_amount == 0
        assert totals.discount_amount == 0
        assert totals.total == 0

    def test_defaults_no_tax_no_discount(self):
        totals = calculate_invoice([_item(1, 500), _item(3, 120)])

        assert totals.subtotal == 860
        assert totals.total == 860

    def test_same_input_same_output(self):
        items = [_item(3, 33.3), _item(1, 0.1)]

        first = calculate_invoice(items, tax=7.5, discount=2)
        second = calculate_invoice(items, tax=7.5, discount=2)

        assert first == second

    def test_no_rounding(self):
        """Nessun arrotondamento a 2 decimali."""
        totals = calculate_invoice([_item(1, 10)], tax=3.333)

        assert totals.tax_amount == pytest.approx(0.3333)


class TestTotalsIdentity:
    """subtotal e totale rispettano le formule per liste e aliquote diverse."""

    @pytest.mark.parametrize("rows", [
        [(1, 0)],
        [(2, 100), (0.5, 19.99)],
        [(10, 3.3), (1, 1), (7, 0.01)],
    ])
    @pytest.mark.parametrize("tax,discount", [(0, 0), (22, 0), (10, 5), (100, 100)])
    def test_formulas(self, rows, tax, discount):
        items = [_item(q, p) for q, p in rows]

        totals = calculate_invoice(items, tax=tax, discount=discount)

        subtotal = sum(q * p for q, p in rows)
        assert totals.subtotal == pytest.approx(subtotal)
        assert totals.total == pytest.approx(subtotal + subtotal * tax / 100 - subtotal * discount / 100)
