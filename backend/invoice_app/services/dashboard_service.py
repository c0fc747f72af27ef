"""
Service per le statistiche della dashboard
Progetto: Invoice Manager
"""

import logging

from invoice_app.core.store import DataStore
from invoice_app.schemas.dashboard import DashboardStats
from invoice_app.schemas.invoice import Invoice, InvoiceStatus

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


class DashboardService:
    """
    Calcola gli indicatori della dashboard a partire dagli stati
    impostati manualmente (nessuna deduzione da due_date).
    """

    async def get_stats(self, store: DataStore) -> DashboardStats:
        """
        Riepilogo importi e conteggi.

        Returns:
            DashboardStats: tutti zero se non ci sono fatture
        """
        invoices = await store.get_invoices()
        client_count = len(await store.get_clients())
        product_count = len(await store.get_products())

        stats = self.compute(invoices)
        stats.client_count = client_count
        stats.product_count = product_count
        return stats

    @staticmethod
    def compute(invoices: list[Invoice]) -> DashboardStats:
        paid = [inv for inv in invoices if inv.status == InvoiceStatus.PAID]
        pending = [inv for inv in invoices if inv.status == InvoiceStatus.PENDING]
        overdue = [inv for inv in invoices if inv.status == InvoiceStatus.OVERDUE]

        average = sum(inv.total for inv in invoices) / len(invoices) if invoices else 0.0

        recent = sorted(invoices, key=lambda inv: inv.created_at, reverse=True)[:RECENT_LIMIT]
        upcoming = sorted(pending, key=lambda inv: inv.due_date)[:RECENT_LIMIT]

        return DashboardStats(
            total_revenue=sum(inv.total for inv in paid),
            paid_invoices=len(paid),
            pending_amount=sum(inv.total for inv in pending),
            overdue_amount=sum(inv.total for inv in overdue),
            average_invoice=average,
            invoice_count=len(invoices),
            recent_invoices=recent,
            upcoming_invoices=upcoming,
        )
