"""
Service Layer per l'entità Client
Progetto: Invoice Manager

Definisce la logica di business per la gestione dei clienti:
- Validazione del form prima di ogni scrittura
- Cancellazione diretta, senza cascata sulle fatture
- Risoluzione del nome con segnaposto per riferimenti orfani
"""

import logging

from invoice_app.core.exceptions import BusinessValidationError, NotFoundError
from invoice_app.core.store import DataStore
from invoice_app.schemas.client import Client, ClientCreate, ClientUpdate
from invoice_app.services.numbering import generate_id
from invoice_app.services.validation import validate_client_form

# Logger per questo modulo
logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "Unknown Client"


class ClientService:
    """
    Service per la gestione delle operazioni CRUD sui clienti.

    Fornisce metodi asincroni che lavorano sull'archivio passato
    come primo argomento, senza dipendenze da FastAPI.

    Usage with Dependency Injection:
        from invoice_app.services.client_service import ClientService

        @router.get("/clients")
        async def get_clients(store: DataStore = Depends(get_store)):
            return await ClientService().get_all(store)
    """

    async def get_all(self, store: DataStore) -> list[Client]:
        """Tutti i clienti, nell'ordine di inserimento."""
        clients = await store.get_clients()
        logger.debug("Recuperati %s clienti", len(clients))
        return clients

    async def get_by_id(self, store: DataStore, client_id: str) -> Client:
        """
        Recupera un cliente tramite ID.

        Args:
            store: Archivio dell'applicazione
            client_id: ID del cliente

        Returns:
            Oggetto Client

        Raises:
            NotFoundError: Se il cliente non esiste
        """
        client = await store.get_client_by_id(client_id)
        if client is None:
            logger.warning("Cliente non trovato: %s", client_id)
            raise NotFoundError(f"Client {client_id} not found")
        return client

    async def get_display_name(self, store: DataStore, client_id: str) -> str:
        """
        Nome del cliente per la visualizzazione.

        Un cliente eliminato mentre una fattura lo referenzia non è
        un errore: viene mostrato come "Unknown Client".
        """
        client = await store.get_client_by_id(client_id)
        return client.name if client else UNKNOWN_CLIENT

    async def create(self, store: DataStore, client_data: ClientCreate) -> Client:
        """
        Crea un nuovo cliente.

        Args:
            store: Archivio dell'applicazione
            client_data: Dati del form

        Returns:
            Oggetto Client appena creato, con ID generato

        Raises:
            BusinessValidationError: Se nome, email o indirizzo non sono validi
        """
        errors = validate_client_form(client_data.name, client_data.email, client_data.address)
        if errors:
            logger.info("Form cliente non valido: %s", ", ".join(sorted(errors)))
            raise BusinessValidationError("Invalid client", errors=errors)

        client = Client(id=generate_id(), **client_data.model_dump())

        clients = await store.get_clients()
        clients.append(client)
        await store.save_clients(clients)

        logger.info("Creato nuovo cliente: %s - %s <%s>", client.id, client.name, client.email)
        return client

    async def update(
        self,
        store: DataStore,
        client_id: str,
        client_data: ClientUpdate,
    ) -> Client:
        """
        Aggiorna un cliente esistente.

        Solo i campi presenti nel payload vengono modificati; il
        risultato viene rivalidato come un nuovo form.

        Raises:
            NotFoundError: Se il cliente non esiste
            BusinessValidationError: Se il cliente risultante non è valido
        """
        clients = await store.get_clients()
        index = next((i for i, c in enumerate(clients) if c.id == client_id), None)
        if index is None:
            logger.warning("Cliente da aggiornare non trovato: %s", client_id)
            raise NotFoundError(f"Client {client_id} not found")

        update_data = client_data.model_dump(exclude_unset=True)
        updated = clients[index].model_copy(update=update_data)

        errors = validate_client_form(updated.name, updated.email, updated.address)
        if errors:
            raise BusinessValidationError("Invalid client", errors=errors)

        clients[index] = updated
        await store.save_clients(clients)

        logger.info("Aggiornato cliente %s: campi %s", client_id, ", ".join(sorted(update_data)))
        return updated

    async def delete(self, store: DataStore, client_id: str) -> None:
        """
        Elimina un cliente.

        Le fatture che lo referenziano mantengono il loro client_id.

        Raises:
            NotFoundError: Se il cliente non esiste
        """
        clients = await store.get_clients()
        remaining = [c for c in clients if c.id != client_id]
        if len(remaining) == len(clients):
            logger.warning("Cliente da eliminare non trovato: %s", client_id)
            raise NotFoundError(f"Client {client_id} not found")

        await store.save_clients(remaining)
        logger.info("Eliminato cliente: %s", client_id)
