"""
Schemas Pydantic per l'entità Product
Progetto: Invoice Manager
"""

from typing import Optional

from pydantic import ConfigDict, Field

from invoice_app.schemas.base import CamelModel, StrictCamelModel


class ProductBase(CamelModel):
    """
    Campi comuni del prodotto.

    name e price hanno default "vuoti": le regole (nome obbligatorio,
    prezzo > 0) sono verificate dal service, che restituisce
    messaggi per campo invece di un errore di schema.
    """
    name: str = Field(default="", max_length=200, description="Nome prodotto/servizio")
    price: float = Field(default=0.0, description="Prezzo unitario")
    description: Optional[str] = Field(default=None, description="Descrizione")
    unit: Optional[str] = Field(default=None, max_length=50, description="Unità (hour, item, project...)")


class ProductCreate(ProductBase):
    """Payload per la creazione di un prodotto."""

    model_config = ConfigDict(extra="forbid")


class ProductUpdate(StrictCamelModel):
    """Aggiornamento parziale: solo i campi inviati vengono modificati."""
    name: Optional[str] = Field(default=None, max_length=200)
    price: Optional[float] = None
    description: Optional[str] = None
    unit: Optional[str] = Field(default=None, max_length=50)


class Product(ProductBase):
    """Prodotto persistito."""
    id: str = Field(..., description="Identificativo generato alla creazione")
