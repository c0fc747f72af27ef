"""
Validazione dei form
Progetto: Invoice Manager

Ogni funzione restituisce un dizionario campo → messaggio, vuoto se
il form è valido. Le chiavi sono quelle del frontend (camelCase).
Nessuna eccezione qui: è il service a decidere se sollevare
BusinessValidationError prima di toccare l'archivio.
"""

import re
from typing import Optional, Sequence

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: Optional[str]) -> bool:
    """Controllo sintattico di base: qualcosa@qualcosa.qualcosa, senza spazi."""
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_client_form(
    name: Optional[str],
    email: Optional[str],
    address: Optional[str],
) -> dict[str, str]:
    """Nome, email (valida) e indirizzo obbligatori."""
    errors: dict[str, str] = {}

    if _is_blank(name):
        errors["name"] = "Client name is required"

    if _is_blank(email):
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"

    if _is_blank(address):
        errors["address"] = "Address is required"

    return errors


def validate_product_form(name: Optional[str], price: Optional[float]) -> dict[str, str]:
    """Nome obbligatorio, prezzo strettamente positivo."""
    errors: dict[str, str] = {}

    if _is_blank(name):
        errors["name"] = "Product name is required"

    if price is None or price <= 0:
        errors["price"] = "Price must be greater than zero"

    return errors


def validate_invoice_form(client_id: Optional[str], items: Sequence) -> dict[str, str]:
    """
    Cliente selezionato e almeno una riga.

    Non controlla l'ordine delle date né il segno di quantità/prezzi.
    """
    errors: dict[str, str] = {}

    if not client_id:
        errors["clientId"] = "Please select a client"

    if not items:
        errors["items"] = "Please add at least one item"

    return errors
