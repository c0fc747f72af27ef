"""
Ciclo di vita della fattura
Progetto: Invoice Manager

Stati: draft, pending, paid, overdue. I cambi di stato sono sempre
manuali: "overdue" non viene mai dedotto dalla data di scadenza.

L'interfaccia propone solo le transizioni in SURFACED_TRANSITIONS,
ma il modello non vieta le altre (es. overdue → pending): vengono
applicate e registrate nel log come warning.
"""

import logging

from invoice_app.schemas.invoice import Invoice, InvoiceStatus

logger = logging.getLogger(__name__)


SURFACED_TRANSITIONS: dict[InvoiceStatus, tuple[InvoiceStatus, ...]] = {
    InvoiceStatus.DRAFT: (InvoiceStatus.PENDING, InvoiceStatus.OVERDUE),
    InvoiceStatus.PENDING: (InvoiceStatus.PAID, InvoiceStatus.OVERDUE),
    InvoiceStatus.PAID: (),
    InvoiceStatus.OVERDUE: (),
}


def available_transitions(status: InvoiceStatus) -> list[InvoiceStatus]:
    """Stati raggiungibili con le azioni proposte dall'interfaccia."""
    return list(SURFACED_TRANSITIONS.get(InvoiceStatus(status), ()))


def is_surfaced_transition(current: InvoiceStatus, target: InvoiceStatus) -> bool:
    return InvoiceStatus(target) in SURFACED_TRANSITIONS.get(InvoiceStatus(current), ())


def apply_status(invoice: Invoice, target: InvoiceStatus) -> Invoice:
    """
    Restituisce una copia della fattura con il nuovo stato.

    Nessuno stato è terminale e nessuna transizione è rifiutata.
    """
    target = InvoiceStatus(target)
    if target != invoice.status and not is_surfaced_transition(invoice.status, target):
        logger.warning(
            "Transizione non proposta dall'interfaccia per fattura %s: %s -> %s",
            invoice.invoice_number, invoice.status.value, target.value,
        )
    return invoice.model_copy(update={"status": target})
