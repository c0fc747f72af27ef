"""
Tests per l'archivio chiave-valore su SQLite temporaneo.
"""

import pydantic
import pytest

from invoice_app.core.store import DEMO_PRODUCTS
from invoice_app.schemas.company import CompanyInfo


class TestMissingKeys:
    """Una chiave assente equivale a collezione vuota."""

    async def test_empty_collections(self, store):
        assert await store.get_products() == []
        assert await store.get_clients() == []
        assert await store.get_invoices() == []

    async def test_company_default(self, store):
        company = await store.get_company_info()

        assert company == CompanyInfo.default()
        assert company.name == "Your Company"

    async def test_lookup_missing_id(self, store):
        assert await store.get_client_by_id("nope") is None


class TestPersistence:
    """Tests per scrittura e rilettura delle collezioni."""

    async def test_save_and_reload(self, store, sample_client, sample_product, make_invoice):
        invoice = make_invoice()
        await store.save_clients([sample_client])
        await store.save_products([sample_product])
        await store.save_invoices([invoice])

        assert await store.get_clients() == [sample_client]
        assert await store.get_product_by_id("prod-1") == sample_product
        assert await store.get_invoice_by_id("inv-1") == invoice

    async def test_records_are_camel_case_json(self, store, make_invoice):
        await store.save_invoices([make_invoice()])

        raw = await store.get_item(store.keys.invoices)

        assert '"invoiceNumber":"INV-2501-001"' in raw
        assert '"clientId":"client-1"' in raw

    async def test_overwrite_replaces_collection(self, store, sample_client):
        await store.save_clients([sample_client])
        await store.save_clients([])

        assert await store.get_clients() == []

    async def test_company_round_trip(self, store):
        info = CompanyInfo(name="ACME", address="1 Road", phone="123", email="a@acme.io",
                           website="acme.io")

        await store.save_company_info(info)

        assert await store.get_company_info() == info

    async def test_key_prefix(self, store):
        assert store.keys.products == "invoice_app_products"
        assert store.keys.company == "invoice_app_company"


class TestMalformedData:
    """I dati non leggibili non vengono sostituiti con default."""

    async def test_malformed_json_raises(self, store):
        await store.set_item(store.keys.products, "{not json")

        with pytest.raises(pydantic.ValidationError):
            await store.get_products()

    async def test_verify_propagates(self, store):
        await store.set_item(store.keys.invoices, '[{"id": 1}]')

        with pytest.raises(pydantic.ValidationError):
            await store.verify()


class TestInitializeData:
    """Tests per i dati demo."""

    async def test_seeds_empty_store(self, store):
        await store.initialize_data()

        assert [p.id for p in await store.get_products()] == [p.id for p in DEMO_PRODUCTS]
        assert [c.name for c in await store.get_clients()] == ["John Smith", "Sarah Johnson"]
        assert await store.get_invoices() == []

    async def test_does_not_overwrite_existing(self, store, sample_client):
        other = sample_client.model_copy(update={"id": "mine", "name": "Mine"})
        await store.save_clients([other])

        await store.initialize_data()

        assert await store.get_clients() == [other]
        assert len(await store.get_products()) == len(DEMO_PRODUCTS)

    async def test_clear(self, store):
        await store.initialize_data()

        await store.clear()

        assert await store.get_products() == []
        assert await store.get_clients() == []
