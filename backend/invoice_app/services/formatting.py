"""
Formattazione importi e date per PDF ed email
Progetto: Invoice Manager
"""

import datetime
from typing import Union

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_currency(amount: float, symbol: str = "$") -> str:
    """Es. 1234.5 → '$1,234.50', -10 → '-$10.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_date(value: Union[datetime.date, str]) -> str:
    """Es. 2025-01-05 → 'Jan 5, 2025'. Accetta anche stringhe ISO."""
    if isinstance(value, str):
        value = datetime.date.fromisoformat(value[:10])
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"
