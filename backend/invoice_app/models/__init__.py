"""
Modelli Database SQLAlchemy
Progetto: Invoice Manager

L'archivio è un insieme di record chiave-valore: ogni collezione
(prodotti, clienti, fatture, dati azienda) è un unico record JSON.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class per tutti i modelli SQLAlchemy."""
    pass


from invoice_app.models.storage_record import StorageRecord

__all__ = [
    "Base",
    "StorageRecord",
]
