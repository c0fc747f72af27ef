"""
Modello SQLAlchemy per i record dell'archivio chiave-valore
Progetto: Invoice Manager
"""


from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from invoice_app.models import Base
from invoice_app.models.mixins import TimestampMixin


class StorageRecord(Base, TimestampMixin):
    """
    Un record dell'archivio: chiave fissa → testo JSON.

    Attributes:
        key: Chiave logica (es. 'invoice_app_invoices')
        value: Contenuto JSON serializzato (array o oggetto)
        created_at: Data/ora creazione record
        updated_at: Data/ora ultima scrittura
    """

    __tablename__ = "storage_records"

    key: Mapped[str] = mapped_column(
        String(100),
        primary_key=True,
        doc="Chiave logica del record",
    )

    value: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Valore JSON serializzato",
    )

    def __repr__(self) -> str:
        return f"<StorageRecord(key={self.key!r}, size={len(self.value or '')})>"
