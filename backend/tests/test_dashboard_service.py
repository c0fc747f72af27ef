"""
Tests per le statistiche della dashboard.
"""

import datetime

from invoice_app.schemas.invoice import InvoiceStatus
from invoice_app.services.dashboard_service import DashboardService


class TestDashboardStats:

    def test_empty(self):
        stats = DashboardService.compute([])

        assert stats.total_revenue == 0
        assert stats.average_invoice == 0
        assert stats.recent_invoices == []

    def test_sums_by_status(self, make_invoice):
        invoices = [
            make_invoice("inv-1", InvoiceStatus.PAID, 100),
            make_invoice("inv-2", InvoiceStatus.PAID, 50),
            make_invoice("inv-3", InvoiceStatus.PENDING, 30),
            make_invoice("inv-4", InvoiceStatus.OVERDUE, 20),
            make_invoice("inv-5", InvoiceStatus.DRAFT, 0),
        ]

        stats = DashboardService.compute(invoices)

        assert stats.total_revenue == 150
        assert stats.paid_invoices == 2
        assert stats.pending_amount == 30
        assert stats.overdue_amount == 20
        assert stats.average_invoice == 40
        assert stats.invoice_count == 5

    def test_overdue_not_derived_from_due_date(self, make_invoice):
        """Una fattura pending scaduta resta pending."""
        invoice = make_invoice(status=InvoiceStatus.PENDING, due_date=datetime.date(2000, 1, 1))

        stats = DashboardService.compute([invoice])

        assert stats.pending_amount == invoice.total
        assert stats.overdue_amount == 0

    def test_recent_and_upcoming(self, make_invoice):
        base = datetime.datetime(2025, 1, 1, tzinfo=datetime.timezone.utc)
        invoices = [
            make_invoice(f"inv-{i}", InvoiceStatus.PENDING,
                         due_date=datetime.date(2025, 3, 10 - i),
                         created_at=base + datetime.timedelta(days=i))
            for i in range(7)
        ]

        stats = DashboardService.compute(invoices)

        assert [inv.id for inv in stats.recent_invoices] == ["inv-6", "inv-5", "inv-4", "inv-3", "inv-2"]
        assert [inv.id for inv in stats.upcoming_invoices] == ["inv-6", "inv-5", "inv-4", "inv-3", "inv-2"]

    async def test_counts_from_store(self, seeded_store, make_invoice):
        await seeded_store.save_invoices([make_invoice()])

        stats = await DashboardService().get_stats(seeded_store)

        assert stats.client_count == 1
        assert stats.product_count == 1
        assert stats.invoice_count == 1
