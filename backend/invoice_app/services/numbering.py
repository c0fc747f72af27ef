"""
Generazione identificativi e numeri fattura
Progetto: Invoice Manager
"""

import datetime
import random
import uuid
from typing import Optional


def generate_id() -> str:
    """Identificativo casuale per prodotti, clienti, fatture e righe."""
    return str(uuid.uuid4())


def generate_invoice_number(
    today: Optional[datetime.date] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Numero fattura nel formato INV-{YY}{MM}-{RRR}.

    RRR è un numero casuale 000-999. Non c'è controllo di unicità
    rispetto alle fatture esistenti: due fatture dello stesso mese
    possono ricevere lo stesso numero.
    """
    today = today or datetime.date.today()
    suffix = (rng or random).randrange(1000)
    return f"INV-{today:%y%m}-{suffix:03d}"


def get_due_date(issue_date: datetime.date, days: int = 30) -> datetime.date:
    """Scadenza di default: data emissione + giorni."""
    return issue_date + datetime.timedelta(days=days)
