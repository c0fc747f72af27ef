"""
Service Layer per l'entità Product
Progetto: Invoice Manager

Definisce la logica di business per la gestione del catalogo prodotti.
"""

import logging

from invoice_app.core.exceptions import BusinessValidationError, NotFoundError
from invoice_app.core.store import DataStore
from invoice_app.schemas.product import Product, ProductCreate, ProductUpdate
from invoice_app.services.numbering import generate_id
from invoice_app.services.validation import validate_product_form

# Logger per questo modulo
logger = logging.getLogger(__name__)

UNKNOWN_PRODUCT = "Unknown Product"


class ProductService:
    """
    Service per le operazioni CRUD sui prodotti.

    Ogni mutazione legge l'intera collezione, la modifica e la
    riscrive. Eliminare un prodotto non tocca le fatture che lo
    referenziano: il nome viene risolto in "Unknown Product".
    """

    async def get_all(self, store: DataStore) -> list[Product]:
        """Tutti i prodotti, nell'ordine di inserimento."""
        return await store.get_products()

    async def get_by_id(self, store: DataStore, product_id: str) -> Product:
        """
        Recupera un prodotto per ID.

        Raises:
            NotFoundError: Se il prodotto non esiste
        """
        product = await store.get_product_by_id(product_id)
        if product is None:
            logger.warning("Prodotto non trovato: %s", product_id)
            raise NotFoundError(f"Product {product_id} not found")
        return product

    async def get_display_name(self, store: DataStore, product_id: str) -> str:
        """Nome del prodotto o segnaposto se eliminato."""
        product = await store.get_product_by_id(product_id)
        return product.name if product else UNKNOWN_PRODUCT

    async def create(self, store: DataStore, data: ProductCreate) -> Product:
        """
        Crea un nuovo prodotto con ID generato.

        Raises:
            BusinessValidationError: nome mancante o prezzo <= 0
        """
        errors = validate_product_form(data.name, data.price)
        if errors:
            raise BusinessValidationError("Invalid product", errors=errors)

        product = Product(id=generate_id(), **data.model_dump())

        products = await store.get_products()
        products.append(product)
        await store.save_products(products)

        logger.info("Creato prodotto: %s - %s (%s)", product.id, product.name, product.price)
        return product

    async def update(self, store: DataStore, product_id: str, data: ProductUpdate) -> Product:
        """
        Aggiorna i campi inviati di un prodotto.

        Raises:
            NotFoundError: Se il prodotto non esiste
            BusinessValidationError: Se il risultato non è un prodotto valido
        """
        products = await store.get_products()
        index = next((i for i, p in enumerate(products) if p.id == product_id), None)
        if index is None:
            logger.warning("Prodotto da aggiornare non trovato: %s", product_id)
            raise NotFoundError(f"Product {product_id} not found")

        updated = products[index].model_copy(update=data.model_dump(exclude_unset=True))

        errors = validate_product_form(updated.name, updated.price)
        if errors:
            raise BusinessValidationError("Invalid product", errors=errors)

        products[index] = updated
        await store.save_products(products)

        logger.info("Aggiornato prodotto: %s", product_id)
        return updated

    async def delete(self, store: DataStore, product_id: str) -> None:
        """
        Elimina un prodotto.

        Raises:
            NotFoundError: Se il prodotto non esiste
        """
        products = await store.get_products()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            raise NotFoundError(f"Product {product_id} not found")

        await store.save_products(remaining)
        logger.info("Eliminato prodotto: %s", product_id)
