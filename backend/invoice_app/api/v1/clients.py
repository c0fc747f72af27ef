"""
Router FastAPI per l'entità Client
Progetto: Invoice Manager

Definisce gli endpoint API per la gestione dei clienti.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from invoice_app.core.deps import Store, get_client_service
from invoice_app.schemas.client import Client, ClientCreate, ClientUpdate
from invoice_app.services.client_service import ClientService

# Router con prefix e tag
router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
)


@router.get(
    "/",
    name="clients_list",
    summary="Lista clienti",
    description="Recupera tutti i clienti nell'ordine di inserimento.",
    response_model=list[Client],
)
async def get_clients(
    store: Store,
    service: ClientService = Depends(get_client_service),
) -> list[Client]:
    return await service.get_all(store)


@router.get(
    "/{client_id}",
    name="client_detail",
    summary="Dettaglio cliente",
    response_model=Client,
)
async def get_client(
    client_id: str,
    store: Store,
    service: ClientService = Depends(get_client_service),
) -> Client:
    """
    Recupera un cliente per ID.

    Raises:
        NotFoundError: Se il cliente non esiste
    """
    return await service.get_by_id(store, client_id)


@router.post(
    "/",
    name="client_create",
    summary="Crea cliente",
    response_model=Client,
    status_code=status.HTTP_201_CREATED,
)
async def create_client(
    data: ClientCreate,
    request: Request,
    response: Response,
    store: Store,
    service: ClientService = Depends(get_client_service),
) -> Client:
    """
    Crea un nuovo cliente.

    Validazione (422 con messaggi per campo):
    - name obbligatorio
    - email obbligatoria e con formato valido
    - address obbligatorio
    """
    client = await service.create(store, data)
    response.headers["Location"] = request.app.url_path_for("clients_list")
    return client


@router.put(
    "/{client_id}",
    name="client_update",
    summary="Aggiorna cliente",
    response_model=Client,
)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    store: Store,
    service: ClientService = Depends(get_client_service),
) -> Client:
    return await service.update(store, client_id, data)


@router.delete(
    "/{client_id}",
    name="client_delete",
    summary="Elimina cliente",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_client(
    client_id: str,
    store: Store,
    service: ClientService = Depends(get_client_service),
) -> None:
    """
    Elimina un cliente.

    Le fatture del cliente restano in archivio e mostrano "Unknown Client".
    """
    await service.delete(store, client_id)
