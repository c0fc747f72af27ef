"""
Schemas Pydantic per la dashboard
Progetto: Invoice Manager
"""

from pydantic import Field

from invoice_app.schemas.base import CamelModel
from invoice_app.schemas.invoice import Invoice


class DashboardStats(CamelModel):
    """Riepilogo importi e conteggi calcolato sugli stati delle fatture."""
    total_revenue: float = Field(0.0, description="Somma dei totali delle fatture pagate")
    paid_invoices: int = Field(0, description="Numero di fatture pagate")
    pending_amount: float = Field(0.0, description="Somma dei totali in attesa")
    overdue_amount: float = Field(0.0, description="Somma dei totali scaduti")
    average_invoice: float = Field(0.0, description="Media dei totali su tutte le fatture")
    invoice_count: int = 0
    client_count: int = 0
    product_count: int = 0
    recent_invoices: list[Invoice] = Field(default_factory=list, description="Ultime 5 per data creazione")
    upcoming_invoices: list[Invoice] = Field(default_factory=list, description="Prossime 5 in attesa per scadenza")
