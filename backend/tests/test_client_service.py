"""
Tests per ClientService.
"""

import pytest

from invoice_app.core.exceptions import BusinessValidationError, NotFoundError
from invoice_app.schemas.client import ClientCreate, ClientUpdate
from invoice_app.schemas.invoice import InvoiceCreate, InvoiceItemInput
from invoice_app.services.client_service import UNKNOWN_CLIENT


class TestCreateClient:

    async def test_create(self, store, client_service):
        client = await client_service.create(
            store,
            ClientCreate(name="Ann", email=" ann@example.com ", address="Via Roma 1"),
        )

        assert client.email == "ann@example.com"
        assert await client_service.get_by_id(store, client.id) == client

    async def test_invalid_email_no_write(self, store, client_service):
        with pytest.raises(BusinessValidationError) as exc_info:
            await client_service.create(
                store, ClientCreate(name="Ann", email="not-an-email", address="Via Roma 1"),
            )

        assert exc_info.value.errors == {"email": "Please enter a valid email address"}
        assert exc_info.value.extra == {"errors": exc_info.value.errors}
        assert await store.get_clients() == []


class TestUpdateClient:

    async def test_update(self, seeded_store, client_service):
        updated = await client_service.update(
            seeded_store, "client-1", ClientUpdate(phone="555-0000"),
        )

        assert updated.phone == "555-0000"
        assert updated.name == "John Smith"

    async def test_missing(self, store, client_service):
        with pytest.raises(NotFoundError):
            await client_service.update(store, "nope", ClientUpdate(name="X"))


class TestDeleteClient:

    async def test_invoice_keeps_reference(self, seeded_store, client_service, invoice_service):
        """Cliente eliminato: la fattura resta e mostra "Unknown Client"."""
        invoice = await invoice_service.create(
            seeded_store,
            InvoiceCreate(client_id="client-1", items=[InvoiceItemInput(product_id="prod-1")]),
        )

        await client_service.delete(seeded_store, "client-1")

        view = await invoice_service.get_view(seeded_store, invoice.id)
        assert view.client_id == "client-1"
        assert view.client_name == UNKNOWN_CLIENT
        assert await client_service.get_display_name(seeded_store, "client-1") == UNKNOWN_CLIENT

    async def test_delete_missing(self, store, client_service):
        with pytest.raises(NotFoundError):
            await client_service.delete(store, "nope")
