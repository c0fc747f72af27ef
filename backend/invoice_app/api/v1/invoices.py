"""
Router FastAPI per l'entità Invoice
Progetto: Invoice Manager

Definisce gli endpoint API per la gestione delle fatture:
- CRUD completo
- Cambio stato (draft/pending/paid/overdue)
- Anteprima totali per il form
- Esportazione PDF e link email di sollecito
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from invoice_app.core.deps import (
    AppSettings,
    Store,
    get_invoice_service,
    get_pdf_service,
)
from invoice_app.core.exceptions import NotFoundError
from invoice_app.schemas.invoice import (
    InvoiceCreate,
    InvoiceStatus,
    InvoiceStatusUpdate,
    InvoiceTotals,
    InvoiceUpdate,
    InvoiceView,
    MailtoLink,
    TotalsPreviewRequest,
)
from invoice_app.services.invoice_service import InvoiceService
from invoice_app.services.mail_service import build_payment_reminder
from invoice_app.services.pdf_service import PdfService

# Router con prefix e tag
router = APIRouter(
    prefix="/invoices",
    tags=["Invoices"],
)


@router.get(
    "/",
    name="invoices_list",
    summary="Lista fatture",
    description="Recupera le fatture con nome cliente risolto ed eventuali filtri.",
    response_model=list[InvoiceView],
    status_code=status.HTTP_200_OK,
)
async def get_invoices(
    store: Store,
    status_filter: Optional[InvoiceStatus] = Query(
        None,
        alias="status",
        description="Filtro per stato (draft, pending, paid, overdue)",
    ),
    client_id: Optional[str] = Query(
        None,
        alias="clientId",
        description="Filtro per ID cliente",
    ),
    service: InvoiceService = Depends(get_invoice_service),
) -> list[InvoiceView]:
    return await service.get_views(store, status_filter=status_filter, client_id=client_id)


@router.post(
    "/calculate",
    name="invoice_totals_preview",
    summary="Anteprima totali",
    description="Calcola subtotale, imposta, sconto e totale senza salvare nulla.",
    response_model=InvoiceTotals,
)
async def preview_totals(
    data: TotalsPreviewRequest,
    store: Store,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceTotals:
    return await service.preview_totals(store, data.items, data.tax, data.discount)


@router.get(
    "/{invoice_id}",
    name="invoice_detail",
    summary="Dettaglio fattura",
    response_model=InvoiceView,
)
async def get_invoice(
    invoice_id: str,
    store: Store,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceView:
    """
    Recupera una fattura con righe, nomi prodotto e stati raggiungibili.

    Raises:
        NotFoundError: Se la fattura non esiste
    """
    return await service.get_view(store, invoice_id)


@router.post(
    "/",
    name="invoice_create",
    summary="Crea fattura",
    response_model=InvoiceView,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    data: InvoiceCreate,
    request: Request,
    response: Response,
    store: Store,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceView:
    """
    Crea una nuova fattura.

    Numero, data emissione e scadenza sono generati se non inviati.
    I totali sono sempre calcolati dal server.

    Raises:
        BusinessValidationError: Cliente non selezionato o nessuna riga
    """
    invoice = await service.create(store, data)
    response.headers["Location"] = request.app.url_path_for("invoice_detail", invoice_id=invoice.id)
    views = await service.build_views(store, [invoice])
    return views[0]


@router.put(
    "/{invoice_id}",
    name="invoice_update",
    summary="Aggiorna fattura",
    response_model=InvoiceView,
)
async def update_invoice(
    invoice_id: str,
    data: InvoiceUpdate,
    store: Store,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceView:
    invoice = await service.update(store, invoice_id, data)
    views = await service.build_views(store, [invoice])
    return views[0]


@router.patch(
    "/{invoice_id}/status",
    name="invoice_status_update",
    summary="Cambia stato fattura",
    response_model=InvoiceView,
)
async def update_invoice_status(
    invoice_id: str,
    data: InvoiceStatusUpdate,
    store: Store,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceView:
    """
    Imposta lo stato richiesto.

    Le azioni proposte dall'interfaccia sono in ``availableStatuses``;
    il server accetta comunque qualsiasi stato valido.
    """
    invoice = await service.update_status(store, invoice_id, data.status)
    views = await service.build_views(store, [invoice])
    return views[0]


@router.delete(
    "/{invoice_id}",
    name="invoice_delete",
    summary="Elimina fattura",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_invoice(
    invoice_id: str,
    store: Store,
    service: InvoiceService = Depends(get_invoice_service),
) -> None:
    await service.delete(store, invoice_id)


@router.get(
    "/{invoice_id}/pdf",
    name="invoice_pdf",
    summary="Scarica PDF fattura",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def download_invoice_pdf(
    invoice_id: str,
    store: Store,
    service: InvoiceService = Depends(get_invoice_service),
    pdf_service: PdfService = Depends(get_pdf_service),
) -> Response:
    """
    Genera il PDF della fattura (Invoice-{numero}.pdf).

    Raises:
        NotFoundError: Fattura inesistente o cliente non più in archivio
    """
    invoice = await service.get_by_id(store, invoice_id)
    document = await pdf_service.export_invoice(store, invoice)
    if document is None:
        raise NotFoundError(
            f"Client {invoice.client_id} not found for invoice {invoice.invoice_number}"
        )

    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )


@router.get(
    "/{invoice_id}/email",
    name="invoice_email",
    summary="Link email di sollecito",
    response_model=MailtoLink,
)
async def get_invoice_email(
    invoice_id: str,
    store: Store,
    settings: AppSettings,
    service: InvoiceService = Depends(get_invoice_service),
) -> MailtoLink:
    invoice = await service.get_by_id(store, invoice_id)
    client = await store.get_client_by_id(invoice.client_id)
    if client is None:
        raise NotFoundError(f"Client {invoice.client_id} not found")
    return build_payment_reminder(invoice, client, settings.currency_symbol)
