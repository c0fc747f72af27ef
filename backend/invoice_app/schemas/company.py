"""
Schemas Pydantic per i dati dell'azienda emittente
Progetto: Invoice Manager
"""

from typing import Optional

from pydantic import Field

from invoice_app.schemas.base import StrictCamelModel


class CompanyInfo(StrictCamelModel):
    """
    Profilo dell'azienda che emette le fatture.

    Record unico, letto e scritto sempre per intero; campi sconosciuti rifiutati.
    """
    name: str = Field(..., max_length=200)
    address: str
    phone: str
    email: str
    website: Optional[str] = None
    logo: Optional[str] = Field(default=None, description="URL o data URI del logo")

    @classmethod
    def default(cls) -> "CompanyInfo":
        """Profilo usato quando il record non è ancora stato salvato."""
        return cls(
            name="Your Company",
            address="123 Business Street, City, Country",
            phone="+1 (555) 123-4567",
            email="contact@yourcompany.com",
        )
