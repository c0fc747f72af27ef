"""
Schemas Pydantic per il progetto Invoice Manager

Questo modulo contiene tutti gli schemi Pydantic utilizzati per la validazione,
la serializzazione delle risposte API e il formato dei record persistiti.
"""

from invoice_app.schemas.client import Client, ClientCreate, ClientUpdate
from invoice_app.schemas.company import CompanyInfo
from invoice_app.schemas.dashboard import DashboardStats
from invoice_app.schemas.invoice import (
    Invoice,
    InvoiceCreate,
    InvoiceItem,
    InvoiceItemInput,
    InvoiceItemView,
    InvoiceStatus,
    InvoiceStatusUpdate,
    InvoiceTotals,
    InvoiceUpdate,
    InvoiceView,
    MailtoLink,
    TotalsPreviewRequest,
)
from invoice_app.schemas.product import Product, ProductCreate, ProductUpdate

__all__ = [
    "Client",
    "ClientCreate",
    "ClientUpdate",
    "CompanyInfo",
    "DashboardStats",
    "Invoice",
    "InvoiceCreate",
    "InvoiceItem",
    "InvoiceItemInput",
    "InvoiceItemView",
    "InvoiceStatus",
    "InvoiceStatusUpdate",
    "InvoiceTotals",
    "InvoiceUpdate",
    "InvoiceView",
    "MailtoLink",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "TotalsPreviewRequest",
]
