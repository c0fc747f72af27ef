"""
Unit tests per il ciclo di vita della fattura.
"""

import logging

from invoice_app.schemas.invoice import InvoiceStatus
from invoice_app.services.lifecycle import (
    apply_status,
    available_transitions,
    is_surfaced_transition,
)


class TestAvailableTransitions:
    """Tests per le azioni proposte dall'interfaccia."""

    def test_draft(self):
        assert available_transitions(InvoiceStatus.DRAFT) == [
            InvoiceStatus.PENDING, InvoiceStatus.OVERDUE,
        ]

    def test_pending(self):
        assert available_transitions(InvoiceStatus.PENDING) == [
            InvoiceStatus.PAID, InvoiceStatus.OVERDUE,
        ]

    def test_paid_and_overdue_have_no_actions(self):
        assert available_transitions(InvoiceStatus.PAID) == []
        assert available_transitions(InvoiceStatus.OVERDUE) == []

    def test_accepts_plain_string(self):
        assert is_surfaced_transition("pending", "paid") is True


class TestApplyStatus:
    """Tests per il cambio di stato."""

    def test_returns_copy_with_new_status(self, make_invoice):
        invoice = make_invoice(status=InvoiceStatus.DRAFT)

        updated = apply_status(invoice, InvoiceStatus.PENDING)

        assert updated.status == InvoiceStatus.PENDING
        assert invoice.status == InvoiceStatus.DRAFT
        assert updated.total == invoice.total

    def test_non_surfaced_transition_is_applied_with_warning(self, make_invoice, caplog):
        """overdue → pending non è proposto ma non viene rifiutato."""
        invoice = make_invoice(status=InvoiceStatus.OVERDUE)

        with caplog.at_level(logging.WARNING, logger="invoice_app.services.lifecycle"):
            updated = apply_status(invoice, InvoiceStatus.PENDING)

        assert updated.status == InvoiceStatus.PENDING
        assert "overdue -> pending" in caplog.text

    def test_same_status_no_warning(self, make_invoice, caplog):
        invoice = make_invoice(status=InvoiceStatus.PAID)

        with caplog.at_level(logging.WARNING, logger="invoice_app.services.lifecycle"):
            apply_status(invoice, InvoiceStatus.PAID)

        assert caplog.text == ""
