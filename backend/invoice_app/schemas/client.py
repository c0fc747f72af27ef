"""
Schemas Pydantic per l'entità Client
Progetto: Invoice Manager
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from invoice_app.schemas.base import CamelModel, StrictCamelModel


def _strip(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()


class ClientBase(CamelModel):
    """
    Anagrafica cliente.

    name, email e address sono obbligatori ma validati dal service
    (messaggi per campo), qui hanno default vuoto.
    """
    name: str = Field(default="", max_length=200, description="Nome del referente")
    email: str = Field(default="", max_length=255, description="Indirizzo email")
    address: str = Field(default="", description="Indirizzo completo")
    phone: Optional[str] = Field(default=None, max_length=50, description="Telefono")
    company: Optional[str] = Field(default=None, max_length=200, description="Ragione sociale")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _strip(v) if isinstance(v, str) else v


class ClientCreate(ClientBase):
    """Payload per la creazione di un cliente."""

    model_config = ConfigDict(extra="forbid")


class ClientUpdate(StrictCamelModel):
    """Aggiornamento parziale del cliente."""
    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    company: Optional[str] = Field(default=None, max_length=200)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _strip(v) if isinstance(v, str) else v


class Client(ClientBase):
    """Cliente persistito."""
    id: str = Field(..., description="Identificativo generato alla creazione")
