"""
Service Layer per la Fatturazione
Progetto: Invoice Manager

Definisce la logica di business per la gestione delle fatture:
creazione con numerazione e totali, modifica completa, cambio
di stato manuale, eliminazione e viste con riferimenti risolti.
"""

import datetime
import logging
from typing import Iterable, Optional

from invoice_app.core.exceptions import BusinessValidationError, NotFoundError
from invoice_app.core.store import DataStore
from invoice_app.schemas.client import Client
from invoice_app.schemas.invoice import (
    Invoice,
    InvoiceCreate,
    InvoiceItem,
    InvoiceItemInput,
    InvoiceItemView,
    InvoiceStatus,
    InvoiceTotals,
    InvoiceUpdate,
    InvoiceView,
)
from invoice_app.schemas.product import Product
from invoice_app.services.calculator import calculate_invoice, line_total
from invoice_app.services.client_service import UNKNOWN_CLIENT
from invoice_app.services.lifecycle import apply_status, available_transitions
from invoice_app.services.numbering import generate_id, generate_invoice_number, get_due_date
from invoice_app.services.product_service import UNKNOWN_PRODUCT
from invoice_app.services.validation import validate_invoice_form

# Logger per questo modulo
logger = logging.getLogger(__name__)


class InvoiceService:
    """
    Service per la gestione delle operazioni sulle fatture.

    Implementa:
    - Costruzione righe (prezzo e descrizione presi dal prodotto se mancanti)
    - Ricalcolo completo dei totali a ogni modifica di righe, imposta o sconto
    - Numerazione INV-YYMM-RRR senza controllo di unicità
    - Cambio stato manuale (overdue non è mai automatico)
    - Eliminazione incondizionata
    """

    def __init__(self, payment_terms_days: int = 30) -> None:
        self.payment_terms_days = payment_terms_days

    # ------------------------------------------------------------
    # Letture
    # ------------------------------------------------------------

    async def get_all(
        self,
        store: DataStore,
        status_filter: Optional[InvoiceStatus] = None,
        client_id: Optional[str] = None,
    ) -> list[Invoice]:
        """
        Lista delle fatture, con filtri opzionali.

        Args:
            store: Archivio dell'applicazione
            status_filter: Solo fatture in questo stato
            client_id: Solo fatture di questo cliente

        Returns:
            list[Invoice]: Fatture nell'ordine di inserimento
        """
        invoices = await store.get_invoices()

        if status_filter is not None:
            invoices = [inv for inv in invoices if inv.status == status_filter]

        if client_id:
            invoices = [inv for inv in invoices if inv.client_id == client_id]

        return invoices

    async def get_by_id(self, store: DataStore, invoice_id: str) -> Invoice:
        """
        Recupera una fattura per ID.

        Raises:
            NotFoundError: Fattura non trovata
        """
        invoice = await store.get_invoice_by_id(invoice_id)
        if invoice is None:
            logger.warning("Fattura non trovata: %s", invoice_id)
            raise NotFoundError(f"Invoice {invoice_id} not found")
        return invoice

    async def get_view(self, store: DataStore, invoice_id: str) -> InvoiceView:
        """Dettaglio fattura con nome cliente e nomi prodotto risolti."""
        invoice = await self.get_by_id(store, invoice_id)
        views = await self.build_views(store, [invoice])
        return views[0]

    async def get_views(
        self,
        store: DataStore,
        status_filter: Optional[InvoiceStatus] = None,
        client_id: Optional[str] = None,
    ) -> list[InvoiceView]:
        invoices = await self.get_all(store, status_filter=status_filter, client_id=client_id)
        return await self.build_views(store, invoices)

    async def build_views(self, store: DataStore, invoices: Iterable[Invoice]) -> list[InvoiceView]:
        """
        Risolve i riferimenti di più fatture con una sola lettura
        di clienti e prodotti.
        """
        clients = {c.id: c for c in await store.get_clients()}
        products = {p.id: p for p in await store.get_products()}
        return [self._to_view(inv, clients, products) for inv in invoices]

    @staticmethod
    def _to_view(
        invoice: Invoice,
        clients: dict[str, Client],
        products: dict[str, Product],
    ) -> InvoiceView:
        client = clients.get(invoice.client_id)
        items = [
            InvoiceItemView(
                **item.model_dump(),
                product_name=products[item.product_id].name
                if item.product_id in products else UNKNOWN_PRODUCT,
            )
            for item in invoice.items
        ]
        data = invoice.model_dump(exclude={"items"})
        return InvoiceView(
            **data,
            items=items,
            client_name=client.name if client else UNKNOWN_CLIENT,
            available_statuses=available_transitions(invoice.status),
        )

    # ------------------------------------------------------------
    # Righe e totali
    # ------------------------------------------------------------

    @staticmethod
    def build_items(
        items: Iterable[InvoiceItemInput],
        products: dict[str, Product],
    ) -> list[InvoiceItem]:
        """
        Converte le righe del form in righe persistite.

        Se la riga indica un prodotto esistente e non specifica prezzo
        o descrizione, vengono usati quelli del prodotto. Il totale
        riga è sempre quantity * price.
        """
        result = []
        for item in items:
            product = products.get(item.product_id)

            price = item.price
            if price is None:
                price = product.price if product else 0.0

            description = item.description
            if description is None:
                description = (product.description or "") if product else ""

            result.append(
                InvoiceItem(
                    id=item.id or generate_id(),
                    product_id=item.product_id,
                    description=description,
                    quantity=item.quantity,
                    price=price,
                    total=line_total(item.quantity, price),
                )
            )
        return result

    async def preview_totals(
        self,
        store: DataStore,
        items: list[InvoiceItemInput],
        tax: float = 0,
        discount: float = 0,
    ) -> InvoiceTotals:
        """Totali di un form non salvato (nessuna scrittura)."""
        products = {p.id: p for p in await store.get_products()}
        return calculate_invoice(self.build_items(items, products), tax, discount)

    # ------------------------------------------------------------
    # Mutazioni
    # ------------------------------------------------------------

    async def create(
        self,
        store: DataStore,
        data: InvoiceCreate,
        today: Optional[datetime.date] = None,
    ) -> Invoice:
        """
        Crea una nuova fattura.

        Steps:
        1. Valida il form (cliente selezionato, almeno una riga)
        2. Costruisce le righe e calcola i totali
        3. Genera numero fattura e date mancanti
        4. Aggiunge la fattura alla collezione e la salva

        Raises:
            BusinessValidationError: Form non valido (nessuna scrittura)
        """
        errors = validate_invoice_form(data.client_id, data.items)
        if errors:
            logger.info("Form fattura non valido: %s", ", ".join(sorted(errors)))
            raise BusinessValidationError("Invalid invoice", errors=errors)

        today = today or datetime.date.today()
        products = {p.id: p for p in await store.get_products()}
        items = self.build_items(data.items, products)
        totals = calculate_invoice(items, data.tax, data.discount)

        issue_date = data.issue_date or today
        invoice = Invoice(
            id=generate_id(),
            invoice_number=data.invoice_number or generate_invoice_number(today),
            client_id=data.client_id,
            issue_date=issue_date,
            due_date=data.due_date or get_due_date(issue_date, self.payment_terms_days),
            items=items,
            tax=data.tax,
            discount=data.discount,
            notes=data.notes,
            status=data.status,
            created_at=datetime.datetime.now(datetime.timezone.utc),
            **totals.model_dump(),
        )

        invoices = await store.get_invoices()
        invoices.append(invoice)
        await store.save_invoices(invoices)

        logger.info(
            "Creata fattura %s (%s) per cliente %s: totale %s",
            invoice.invoice_number, invoice.id, invoice.client_id, invoice.total,
        )
        return invoice

    async def update(
        self,
        store: DataStore,
        invoice_id: str,
        data: InvoiceUpdate,
    ) -> Invoice:
        """
        Modifica completa di una fattura.

        Aggiorna solo i campi inviati. Se cambiano items, tax o
        discount, i totali vengono ricalcolati da zero.

        Raises:
            NotFoundError: Fattura non trovata
            BusinessValidationError: Il risultato non è una fattura valida
        """
        invoices = await store.get_invoices()
        index = next((i for i, inv in enumerate(invoices) if inv.id == invoice_id), None)
        if index is None:
            logger.warning("Fattura da aggiornare non trovata: %s", invoice_id)
            raise NotFoundError(f"Invoice {invoice_id} not found")

        current = invoices[index]
        # null esplicito azzera solo le note
        update_data = {
            key: value
            for key, value in data.model_dump(exclude_unset=True, exclude={"items"}).items()
            if value is not None or key == "notes"
        }

        client_id = update_data.get("client_id", current.client_id)
        items = current.items
        if data.items is not None:
            products = {p.id: p for p in await store.get_products()}
            items = self.build_items(data.items, products)

        errors = validate_invoice_form(client_id, items)
        if errors:
            raise BusinessValidationError("Invalid invoice", errors=errors)

        status = update_data.pop("status", None)
        updated = current.model_copy(update={**update_data, "items": items})
        if status is not None:
            updated = apply_status(updated, status)
        totals = calculate_invoice(updated.items, updated.tax, updated.discount)
        updated = updated.model_copy(update=totals.model_dump())

        invoices[index] = updated
        await store.save_invoices(invoices)

        logger.info("Aggiornata fattura %s: totale %s", updated.invoice_number, updated.total)
        return updated

    async def update_status(
        self,
        store: DataStore,
        invoice_id: str,
        status: InvoiceStatus,
    ) -> Invoice:
        """
        Cambia lo stato di una fattura su richiesta dell'utente.

        Raises:
            NotFoundError: Fattura non trovata
        """
        invoices = await store.get_invoices()
        index = next((i for i, inv in enumerate(invoices) if inv.id == invoice_id), None)
        if index is None:
            raise NotFoundError(f"Invoice {invoice_id} not found")

        previous = invoices[index].status
        invoices[index] = apply_status(invoices[index], status)
        await store.save_invoices(invoices)

        logger.info(
            "Fattura %s: stato %s -> %s",
            invoices[index].invoice_number, previous.value, invoices[index].status.value,
        )
        return invoices[index]

    async def delete(self, store: DataStore, invoice_id: str) -> None:
        """
        Elimina una fattura, in qualunque stato.

        Raises:
            NotFoundError: Fattura non trovata
        """
        invoices = await store.get_invoices()
        remaining = [inv for inv in invoices if inv.id != invoice_id]
        if len(remaining) == len(invoices):
            raise NotFoundError(f"Invoice {invoice_id} not found")

        await store.save_invoices(remaining)
        logger.info("Eliminata fattura: %s", invoice_id)
