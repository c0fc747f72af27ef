"""
Calcolo totali fattura
Progetto: Invoice Manager

Funzioni pure, senza stato: stesso input → stesso output.
Aritmetica float nativa, nessun arrotondamento e nessuna valuta.
"""

from typing import Iterable, Protocol

from invoice_app.schemas.invoice import InvoiceTotals


class _HasTotal(Protocol):
    total: float


def line_total(quantity: float, price: float) -> float:
    """Totale riga: quantity * price."""
    return quantity * price


def calculate_invoice(
    items: Iterable[_HasTotal],
    tax: float = 0,
    discount: float = 0,
) -> InvoiceTotals:
    """
    Calcola i totali di una fattura.

    - subtotal = somma dei totali riga
    - tax_amount = subtotal * tax / 100
    - discount_amount = subtotal * discount / 100
    - total = subtotal + tax_amount - discount_amount

    Args:
        items: Righe fattura (serve solo l'attributo total)
        tax: Aliquota imposta in percentuale (default 0)
        discount: Sconto in percentuale (default 0)

    Returns:
        InvoiceTotals: Totali calcolati (tutti 0 con lista vuota)
    """
    subtotal = sum((item.total for item in items), 0.0)
    tax_amount = (subtotal * tax) / 100
    discount_amount = (subtotal * discount) / 100
    total = subtotal + tax_amount - discount_amount

    return InvoiceTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        discount_amount=discount_amount,
        total=total,
    )
