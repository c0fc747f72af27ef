"""
Schemas Pydantic per la Fatturazione
Progetto: Invoice Manager

Contiene:
- Enum: InvoiceStatus
- Schemas per InvoiceItem (righe)
- Schemas per Invoice (create, update, cambio stato, record persistito)
- Schemas di presentazione (InvoiceView, InvoiceTotals, MailtoLink)
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from invoice_app.schemas.base import CamelModel, StrictCamelModel


# -------------------------------------------------------------------
# Enum
# -------------------------------------------------------------------

class InvoiceStatus(str, Enum):
    """Stato della fattura. Cambia solo per azione esplicita dell'utente."""
    DRAFT = "draft"
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


# -------------------------------------------------------------------
# Schemas per InvoiceItem
# -------------------------------------------------------------------

class InvoiceItemInput(StrictCamelModel):
    """
    Riga fattura come inviata dal form.

    price e description possono mancare: vengono presi dal prodotto
    selezionato. total non è accettato, viene sempre ricalcolato.
    """
    id: Optional[str] = Field(default=None, description="ID riga esistente (in modifica)")
    product_id: str = Field(default="", description="ID del prodotto selezionato")
    description: Optional[str] = Field(default=None, description="Descrizione riga")
    quantity: float = Field(default=1, description="Quantità")
    price: Optional[float] = Field(default=None, description="Prezzo unitario")


class InvoiceItem(CamelModel):
    """Riga fattura persistita. Invariante: total == quantity * price."""
    id: str
    product_id: str = ""
    description: str = ""
    quantity: float = 1
    price: float = 0.0
    total: float = 0.0


class InvoiceItemView(InvoiceItem):
    """Riga con il nome prodotto risolto ("Unknown Product" se eliminato)."""
    product_name: str


# -------------------------------------------------------------------
# Totali
# -------------------------------------------------------------------

class InvoiceTotals(CamelModel):
    """Risultato del calcolo totali."""
    subtotal: float = 0.0
    tax_amount: float = 0.0
    discount_amount: float = 0.0
    total: float = 0.0


class TotalsPreviewRequest(StrictCamelModel):
    """Richiesta di ricalcolo totali per un form non ancora salvato."""
    items: list[InvoiceItemInput] = Field(default_factory=list)
    tax: float = Field(default=0, description="Aliquota imposta in percentuale")
    discount: float = Field(default=0, description="Sconto in percentuale")


# -------------------------------------------------------------------
# Schemas per Invoice
# -------------------------------------------------------------------

class InvoiceCreate(StrictCamelModel):
    """
    Payload per la creazione di una fattura.

    client_id e items sono validati dal service (messaggi per campo).
    Se mancano, invoice_number e le date vengono generati.
    """
    invoice_number: Optional[str] = Field(default=None, max_length=50)
    client_id: str = Field(default="", description="ID del cliente")
    issue_date: Optional[datetime.date] = Field(default=None, description="Data emissione (default oggi)")
    due_date: Optional[datetime.date] = Field(default=None, description="Data scadenza (default emissione + termini)")
    items: list[InvoiceItemInput] = Field(default_factory=list)
    tax: float = Field(default=0, description="Aliquota imposta in percentuale")
    discount: float = Field(default=0, description="Sconto in percentuale")
    notes: Optional[str] = None
    status: InvoiceStatus = InvoiceStatus.DRAFT


class InvoiceUpdate(StrictCamelModel):
    """
    Modifica completa della fattura.

    Solo i campi inviati vengono aggiornati; se cambiano items, tax
    o discount i totali vengono ricalcolati.
    """
    invoice_number: Optional[str] = Field(default=None, max_length=50)
    client_id: Optional[str] = None
    issue_date: Optional[datetime.date] = None
    due_date: Optional[datetime.date] = None
    items: Optional[list[InvoiceItemInput]] = None
    tax: Optional[float] = None
    discount: Optional[float] = None
    notes: Optional[str] = None
    status: Optional[InvoiceStatus] = None


class InvoiceStatusUpdate(StrictCamelModel):
    """Cambio di stato esplicito."""
    status: InvoiceStatus


class Invoice(CamelModel):
    """Fattura persistita."""

    id: str
    invoice_number: str
    client_id: str
    issue_date: datetime.date
    due_date: datetime.date
    items: list[InvoiceItem] = Field(default_factory=list)
    tax: float = 0.0
    discount: float = 0.0
    subtotal: float = 0.0
    tax_amount: float = 0.0
    discount_amount: float = 0.0
    total: float = 0.0
    notes: Optional[str] = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    created_at: datetime.datetime


class InvoiceView(Invoice):
    """Fattura con riferimenti risolti, per liste e dettaglio."""
    client_name: str
    items: list[InvoiceItemView] = Field(default_factory=list)
    available_statuses: list[InvoiceStatus] = Field(
        default_factory=list,
        description="Stati raggiungibili con le azioni dell'interfaccia",
    )


class MailtoLink(CamelModel):
    """Email precompilata da aprire con il client di posta dell'utente."""
    recipient: str
    subject: str
    body: str
    url: str
