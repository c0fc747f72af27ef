"""
Service per la generazione di PDF con WeasyPrint + Jinja2.
Progetto: Invoice Manager
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from invoice_app.core.store import DataStore
from invoice_app.schemas.client import Client
from invoice_app.schemas.company import CompanyInfo
from invoice_app.schemas.invoice import Invoice
from invoice_app.schemas.product import Product
from invoice_app.services.formatting import format_currency, format_date
from invoice_app.services.product_service import UNKNOWN_PRODUCT

logger = logging.getLogger(__name__)

# Path alla cartella templates
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
TEMPLATES_DIR = os.path.join(BASE_DIR, "templates")


# Lazy import of weasyprint to avoid startup errors if Pango libraries aren't available
def _get_weasyprint():
    """Lazy import of weasyprint to handle missing system libraries gracefully."""
    try:
        from weasyprint import CSS, HTML
        return HTML, CSS
    except OSError as e:
        raise RuntimeError(
            "WeasyPrint dependencies not found. Please install the Pango libraries "
            "(see https://doc.courtbouillon.org/weasyprint/stable/first_steps.html)"
        ) from e


@dataclass(frozen=True)
class InvoiceDocument:
    """PDF pronto per il download."""
    filename: str
    content: bytes
    media_type: str = "application/pdf"


class PdfService:
    """
    Genera il PDF di una fattura da template HTML/CSS.

    Il documento contiene: intestazione azienda, badge di stato, numero
    e date, blocco "Bill To", tabella righe, riepilogo totali (riga totale
    evidenziata), note opzionali e piè di pagina con numerazione pagine.
    """

    def __init__(self, currency_symbol: str = "$"):
        self.currency_symbol = currency_symbol
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters["currency"] = lambda amount: format_currency(amount, self.currency_symbol)
        self.env.filters["date"] = format_date

    @staticmethod
    def filename_for(invoice: Invoice) -> str:
        return f"Invoice-{invoice.invoice_number}.pdf"

    def build_context(
        self,
        invoice: Invoice,
        client: Client,
        company: CompanyInfo,
        products: dict[str, Product],
    ) -> dict:
        """Dati passati al template."""
        rows = [
            {
                "name": products[item.product_id].name
                if item.product_id in products else UNKNOWN_PRODUCT,
                "description": item.description,
                "quantity": item.quantity,
                "price": item.price,
                "total": item.total,
            }
            for item in invoice.items
        ]

        return {
            "title": f"Invoice-{invoice.invoice_number}",
            "company": company,
            "invoice": invoice,
            "status": invoice.status.value,
            "client": client,
            "rows": rows,
        }

    def render_invoice_html(
        self,
        invoice: Invoice,
        client: Client,
        company: CompanyInfo,
        products: dict[str, Product],
    ) -> str:
        template = self.env.get_template("invoice_template.html")
        return template.render(self.build_context(invoice, client, company, products))

    def generate_invoice_pdf(
        self,
        invoice: Invoice,
        client: Client,
        company: CompanyInfo,
        products: dict[str, Product],
    ) -> bytes:
        """
        Genera il PDF di una fattura.

        Returns:
            bytes: PDF binario pronto per il download
        """
        HTML, CSS = _get_weasyprint()

        html_out = self.render_invoice_html(invoice, client, company, products)
        css = CSS(filename=os.path.join(TEMPLATES_DIR, "invoice_style.css"))

        return HTML(string=html_out, base_url=TEMPLATES_DIR).write_pdf(stylesheets=[css])

    async def export_invoice(self, store: DataStore, invoice: Invoice) -> Optional[InvoiceDocument]:
        """
        Carica cliente, azienda e prodotti dall'archivio e genera il PDF.

        Se il cliente della fattura non esiste più l'esportazione viene
        interrotta: l'errore è solo registrato nel log e si restituisce None.
        """
        client = await store.get_client_by_id(invoice.client_id)
        if client is None:
            logger.error(
                "Esportazione PDF annullata per fattura %s: cliente %s non trovato",
                invoice.invoice_number, invoice.client_id,
            )
            return None

        company = await store.get_company_info()
        products = {p.id: p for p in await store.get_products()}

        content = self.generate_invoice_pdf(invoice, client, company, products)
        logger.info("Generato PDF fattura %s (%s byte)", invoice.invoice_number, len(content))
        return InvoiceDocument(filename=self.filename_for(invoice), content=content)
