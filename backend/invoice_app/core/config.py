"""
Configurazione applicazione - Settings
Progetto: Invoice Manager

Definisce le impostazioni dell'applicazione caricate da variabili d'ambiente.
"""


from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurazione applicazione.

    Carica le impostazioni da variabili d'ambiente (prefisso INVOICE_APP_)
    o dal file .env. Valori di default adatti per uso locale.

    Per ottenere un'istanza singleton:
    - In FastAPI: usa `Depends(get_settings)` per Dependency Injection
    - Altrove: usa `get_settings()` direttamente
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INVOICE_APP_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # ------------------------------------------------------------
    # Configurazione Database
    # ------------------------------------------------------------
    database_url: str = Field(
        default="sqlite+aiosqlite:///./invoice_app.db",
        description="URL connessione database (formato async)",
    )

    db_pool_size: int = Field(
        default=5,
        description="Numero connessioni permanenti nel pool (ignorato con SQLite)",
    )

    db_max_overflow: int = Field(
        default=10,
        description="Connessioni extra temporanee oltre pool_size (ignorato con SQLite)",
    )

    # ------------------------------------------------------------
    # Configurazione Applicazione
    # ------------------------------------------------------------
    app_name: str = Field(
        default="Invoice Manager",
        description="Nome applicazione",
    )

    app_version: str = Field(
        default="1.0.0",
        description="Versione applicazione",
    )

    app_env: Literal["development", "production", "testing"] = Field(
        default="development",
        description="Ambiente di esecuzione (development | production | testing)",
    )

    debug: bool = Field(
        default=False,
        description="Modalità debug",
    )

    # ------------------------------------------------------------
    # Configurazione CORS
    # ------------------------------------------------------------
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        description="Origini CORS permesse",
    )

    # ------------------------------------------------------------
    # Configurazione Logging
    # ------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Livello logging",
    )

    # ------------------------------------------------------------
    # Configurazione Archivio (chiavi dei record persistiti)
    # ------------------------------------------------------------
    storage_key_prefix: str = Field(
        default="invoice_app_",
        description="Prefisso delle chiavi dei record (products, clients, invoices, company)",
    )

    seed_demo_data: bool = Field(
        default=True,
        description="Popola prodotti e clienti demo se l'archivio è vuoto",
    )

    # ------------------------------------------------------------
    # Configurazione Fatturazione
    # ------------------------------------------------------------
    default_payment_terms_days: int = Field(
        default=30,
        ge=0,
        description="Giorni tra data emissione e scadenza se non specificata",
    )

    currency_symbol: str = Field(
        default="$",
        description="Simbolo valuta usato in PDF ed email",
    )

    @property
    def is_production(self) -> bool:
        """Verifica se l'applicazione è in produzione."""
        return self.app_env == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    # ------------------------------------------------------------
    # Validatori
    # ------------------------------------------------------------

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Blocca configurazioni di sviluppo quando app_env è production."""
        if self.app_env != "production":
            return self

        errors = []

        if self.debug:
            errors.append("- debug: deve essere False in produzione")

        for origin in self.cors_origins:
            if "localhost" in origin or "127.0.0.1" in origin:
                errors.append(
                    f"- cors_origins: l'origine '{origin}' non è consentita in produzione"
                )

        if errors:
            error_msg = "Errore di configurazione in produzione:\n" + "\n".join(errors)
            raise ValueError(error_msg)

        return self


@lru_cache()
def get_settings() -> Settings:
    """
    Restituisce l'istanza singleton delle impostazioni.

    Usa lru_cache per garantire che Settings() venga istanziato
    una sola volta e riutilizzato in tutta l'applicazione.
    In fase di test, usa get_settings.cache_clear() per resettare.

    Returns:
        Settings: Istanza delle impostazioni applicazione
    """
    return Settings()
