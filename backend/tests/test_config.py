"""
Tests per le impostazioni dell'applicazione.
"""

import pydantic
import pytest

from invoice_app.core.config import Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.storage_key_prefix == "invoice_app_"
        assert settings.default_payment_terms_days == 30
        assert settings.is_sqlite is True

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("INVOICE_APP_CURRENCY_SYMBOL", "€")

        assert Settings(_env_file=None).currency_symbol == "€"

    def test_production_rejects_debug_and_localhost(self):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Settings(_env_file=None, app_env="production", debug=True)

        assert "debug" in str(exc_info.value)
        assert "localhost" in str(exc_info.value)

    def test_production_ok(self):
        settings = Settings(
            _env_file=None,
            app_env="production",
            cors_origins=["https://invoices.example.com"],
        )

        assert settings.is_production is True
