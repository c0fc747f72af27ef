"""
Composizione email di sollecito
Progetto: Invoice Manager

L'applicazione non invia email: costruisce un link mailto: che il
client di posta dell'utente apre già compilato.
"""

from urllib.parse import quote

from invoice_app.schemas.client import Client
from invoice_app.schemas.invoice import Invoice, MailtoLink
from invoice_app.services.formatting import format_currency, format_date

REMINDER_TEMPLATE = (
    "Dear {client_name},\n\n"
    "Please find attached invoice {invoice_number} for {amount}.\n\n"
    "Payment is due by {due_date}.\n\n"
    "Thank you for your business."
)


def build_payment_reminder(invoice: Invoice, client: Client, currency_symbol: str = "$") -> MailtoLink:
    """Email al cliente con oggetto "Invoice {numero}" e testo di sollecito."""
    subject = f"Invoice {invoice.invoice_number}"
    body = REMINDER_TEMPLATE.format(
        client_name=client.name,
        invoice_number=invoice.invoice_number,
        amount=format_currency(invoice.total, currency_symbol),
        due_date=format_date(invoice.due_date),
    )
    url = f"mailto:{client.email}?subject={quote(subject, safe='')}&body={quote(body, safe='')}"
    return MailtoLink(recipient=client.email, subject=subject, body=body, url=url)
