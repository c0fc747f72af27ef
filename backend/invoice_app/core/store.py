"""
Archivio chiave-valore dell'applicazione
Progetto: Invoice Manager

Quattro record logici, ciascuno sotto una chiave fissa e con valore JSON:
- <prefix>products  → array di Product
- <prefix>clients   → array di Client
- <prefix>invoices  → array di Invoice
- <prefix>company   → oggetto CompanyInfo

Ogni scrittura riscrive l'intera collezione (read-modify-write).
Una chiave assente equivale a collezione vuota / CompanyInfo di default.
I dati malformati NON vengono corretti: l'errore di parsing si propaga.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import TypeAdapter
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from invoice_app.models import StorageRecord
from invoice_app.schemas.client import Client
from invoice_app.schemas.company import CompanyInfo
from invoice_app.schemas.invoice import Invoice
from invoice_app.schemas.product import Product

# Logger per questo modulo
logger = logging.getLogger(__name__)

_products_adapter = TypeAdapter(list[Product])
_clients_adapter = TypeAdapter(list[Client])
_invoices_adapter = TypeAdapter(list[Invoice])


# ------------------------------------------------------------
# Dati demo (caricati al primo avvio se l'archivio è vuoto)
# ------------------------------------------------------------
DEMO_PRODUCTS = [
    Product(
        id="prod-1",
        name="Web Design Service",
        price=1500,
        description="Professional website design",
        unit="project",
    ),
    Product(
        id="prod-2",
        name="Logo Design",
        price=500,
        description="Custom logo design with revisions",
        unit="item",
    ),
    Product(
        id="prod-3",
        name="Consulting Hour",
        price=120,
        description="Professional consulting service",
        unit="hour",
    ),
]

DEMO_CLIENTS = [
    Client(
        id="client-1",
        name="John Smith",
        email="john@example.com",
        address="123 Main St, Anytown, USA",
        phone="(555) 123-4567",
        company="Smith Enterprises",
    ),
    Client(
        id="client-2",
        name="Sarah Johnson",
        email="sarah@example.com",
        address="456 Oak Ave, Somewhere, USA",
        phone="(555) 987-6543",
        company="Johnson Industries",
    ),
]


@dataclass(frozen=True)
class StorageKeys:
    """Chiavi fisse dei quattro record."""
    products: str
    clients: str
    invoices: str
    company: str

    @classmethod
    def from_prefix(cls, prefix: str) -> "StorageKeys":
        return cls(
            products=f"{prefix}products",
            clients=f"{prefix}clients",
            invoices=f"{prefix}invoices",
            company=f"{prefix}company",
        )


class DataStore:
    """
    Archivio esplicito, creato e posseduto dalla radice dell'applicazione
    (``app.state.store``, vedi main.lifespan).

    Espone operazioni di lettura e scrittura per collezione; i service
    lo ricevono come primo argomento, come farebbero con una sessione.

    Usage:
        store = DataStore(session_factory)
        products = await store.get_products()
        products.append(new_product)
        await store.save_products(products)
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        key_prefix: str = "invoice_app_",
    ) -> None:
        self._session_factory = session_factory
        self.keys = StorageKeys.from_prefix(key_prefix)

    # ------------------------------------------------------------
    # Accesso grezzo chiave → testo
    # ------------------------------------------------------------

    async def get_item(self, key: str) -> Optional[str]:
        """Valore JSON grezzo della chiave, None se assente."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(StorageRecord.value).where(StorageRecord.key == key)
            )
            return result.scalar_one_or_none()

    async def set_item(self, key: str, value: str) -> None:
        """Scrive (o sovrascrive) il valore della chiave."""
        async with self._session_factory() as session:
            record = await session.get(StorageRecord, key)
            if record is None:
                session.add(StorageRecord(key=key, value=value))
            else:
                record.value = value
            await session.commit()
        logger.debug("Scritto record %s (%s byte)", key, len(value))

    async def remove_item(self, key: str) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(StorageRecord).where(StorageRecord.key == key))
            await session.commit()

    async def clear(self) -> None:
        """Rimuove tutti e quattro i record."""
        for key in (self.keys.products, self.keys.clients, self.keys.invoices, self.keys.company):
            await self.remove_item(key)
        logger.info("Archivio svuotato")

    # ------------------------------------------------------------
    # Prodotti
    # ------------------------------------------------------------

    async def get_products(self) -> list[Product]:
        raw = await self.get_item(self.keys.products)
        return _products_adapter.validate_json(raw) if raw else []

    async def save_products(self, products: list[Product]) -> None:
        await self.set_item(
            self.keys.products,
            _products_adapter.dump_json(products, by_alias=True).decode(),
        )

    async def get_product_by_id(self, product_id: str) -> Optional[Product]:
        for product in await self.get_products():
            if product.id == product_id:
                return product
        return None

    # ------------------------------------------------------------
    # Clienti
    # ------------------------------------------------------------

    async def get_clients(self) -> list[Client]:
        raw = await self.get_item(self.keys.clients)
        return _clients_adapter.validate_json(raw) if raw else []

    async def save_clients(self, clients: list[Client]) -> None:
        await self.set_item(
            self.keys.clients,
            _clients_adapter.dump_json(clients, by_alias=True).decode(),
        )

    async def get_client_by_id(self, client_id: str) -> Optional[Client]:
        for client in await self.get_clients():
            if client.id == client_id:
                return client
        return None

    # ------------------------------------------------------------
    # Fatture
    # ------------------------------------------------------------

    async def get_invoices(self) -> list[Invoice]:
        raw = await self.get_item(self.keys.invoices)
        return _invoices_adapter.validate_json(raw) if raw else []

    async def save_invoices(self, invoices: list[Invoice]) -> None:
        await self.set_item(
            self.keys.invoices,
            _invoices_adapter.dump_json(invoices, by_alias=True).decode(),
        )

    async def get_invoice_by_id(self, invoice_id: str) -> Optional[Invoice]:
        for invoice in await self.get_invoices():
            if invoice.id == invoice_id:
                return invoice
        return None

    # ------------------------------------------------------------
    # Dati azienda
    # ------------------------------------------------------------

    async def get_company_info(self) -> CompanyInfo:
        raw = await self.get_item(self.keys.company)
        return CompanyInfo.model_validate_json(raw) if raw else CompanyInfo.default()

    async def save_company_info(self, company_info: CompanyInfo) -> None:
        await self.set_item(self.keys.company, company_info.model_dump_json(by_alias=True))

    # ------------------------------------------------------------
    # Avvio
    # ------------------------------------------------------------

    async def verify(self) -> None:
        """
        Legge tutti i record per intero.

        Chiamato all'avvio: un record non leggibile interrompe lo startup
        (pydantic.ValidationError propagata), non viene sostituito con default.
        """
        products = await self.get_products()
        clients = await self.get_clients()
        invoices = await self.get_invoices()
        await self.get_company_info()
        logger.info(
            "Archivio verificato: %s prodotti, %s clienti, %s fatture",
            len(products), len(clients), len(invoices),
        )

    async def initialize_data(self) -> None:
        """Carica prodotti e clienti demo nelle collezioni vuote."""
        if not await self.get_products():
            await self.save_products(list(DEMO_PRODUCTS))
            logger.info("Caricati %s prodotti demo", len(DEMO_PRODUCTS))

        if not await self.get_clients():
            await self.save_clients(list(DEMO_CLIENTS))
            logger.info("Caricati %s clienti demo", len(DEMO_CLIENTS))
