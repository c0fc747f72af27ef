"""
Pytest configuration and fixtures.

Ogni test riceve un archivio vero su un database SQLite temporaneo
(aiosqlite in tmp_path), vuoto e senza dati demo.
"""

import datetime

import pytest

from invoice_app.core.config import Settings
from invoice_app.core.database import build_engine, build_session_factory, close_db, init_db
from invoice_app.core.store import DataStore
from invoice_app.schemas.client import Client
from invoice_app.schemas.invoice import Invoice, InvoiceItem, InvoiceStatus
from invoice_app.schemas.product import Product
from invoice_app.services.client_service import ClientService
from invoice_app.services.invoice_service import InvoiceService
from invoice_app.services.product_service import ProductService


# ============================================================
# Fixtures per configurazione e archivio
# ============================================================


@pytest.fixture
def settings(tmp_path):
    """Settings di test: database nel tmp_path, nessun dato demo."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        app_env="testing",
        seed_demo_data=False,
    )


@pytest.fixture
async def store(settings):
    """Archivio vuoto su database temporaneo."""
    engine = build_engine(settings)
    await init_db(engine)
    yield DataStore(build_session_factory(engine), key_prefix=settings.storage_key_prefix)
    await close_db(engine)


# ============================================================
# Fixtures per i service
# ============================================================


@pytest.fixture
def client_service():
    return ClientService()


@pytest.fixture
def product_service():
    return ProductService()


@pytest.fixture
def invoice_service():
    return InvoiceService(payment_terms_days=30)


# ============================================================
# Dati di esempio
# ============================================================


@pytest.fixture
def sample_client():
    return Client(
        id="client-1",
        name="John Smith",
        email="john@example.com",
        address="123 Main St, Anytown, USA",
        company="Smith Enterprises",
    )


@pytest.fixture
def sample_product():
    return Product(
        id="prod-1",
        name="Web Design Service",
        price=100,
        description="Professional website design",
        unit="project",
    )


@pytest.fixture
def make_invoice():
    """Factory per fatture persistite già calcolate."""

    def _make(
        invoice_id="inv-1",
        status=InvoiceStatus.DRAFT,
        total=100.0,
        client_id="client-1",
        due_date=datetime.date(2025, 2, 4),
        created_at=None,
    ):
        return Invoice(
            id=invoice_id,
            invoice_number=f"INV-2501-{invoice_id[-1:]:0>3}",
            client_id=client_id,
            issue_date=datetime.date(2025, 1, 5),
            due_date=due_date,
            items=[
                InvoiceItem(id="item-1", product_id="prod-1", description="Design",
                            quantity=1, price=total, total=total),
            ],
            subtotal=total,
            total=total,
            status=status,
            created_at=created_at or datetime.datetime(2025, 1, 5, 10, 0, tzinfo=datetime.timezone.utc),
        )

    return _make


@pytest.fixture
async def seeded_store(store, sample_client, sample_product):
    """Archivio con un cliente e un prodotto."""
    await store.save_clients([sample_client])
    await store.save_products([sample_product])
    return store
