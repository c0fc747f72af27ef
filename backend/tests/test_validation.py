"""
Unit tests per la validazione dei form.
"""

import pytest

from invoice_app.schemas.invoice import InvoiceItemInput
from invoice_app.services.validation import (
    is_valid_email,
    validate_client_form,
    validate_invoice_form,
    validate_product_form,
)


class TestEmail:
    """Tests per il controllo sintattico dell'email."""

    @pytest.mark.parametrize("email", ["a@b.co", "john.smith@example.com"])
    def test_valid(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.de", "", None])
    def test_invalid(self, email):
        assert is_valid_email(email) is False


class TestClientForm:
    """Tests per il form cliente."""

    def test_valid(self):
        assert validate_client_form("Ann", "a@b.co", "Via Roma 1") == {}

    def test_all_missing(self):
        errors = validate_client_form("", "", "  ")

        assert errors == {
            "name": "Client name is required",
            "email": "Email is required",
            "address": "Address is required",
        }

    def test_bad_email(self):
        errors = validate_client_form("Ann", "not-an-email", "Via Roma 1")

        assert errors == {"email": "Please enter a valid email address"}


class TestProductForm:
    """Tests per il form prodotto."""

    def test_valid(self):
        assert validate_product_form("Logo", 50) == {}

    @pytest.mark.parametrize("price", [0, -1, None])
    def test_price_must_be_positive(self, price):
        errors = validate_product_form("Logo", price)

        assert errors == {"price": "Price must be greater than zero"}

    def test_name_required(self):
        assert validate_product_form(" ", 10) == {"name": "Product name is required"}


class TestInvoiceForm:
    """Tests per il form fattura."""

    def test_valid(self):
        assert validate_invoice_form("client-1", [InvoiceItemInput(product_id="prod-1")]) == {}

    def test_missing_client_and_items(self):
        errors = validate_invoice_form("", [])

        assert errors == {
            "clientId": "Please select a client",
            "items": "Please add at least one item",
        }
