"""
Router FastAPI per l'entità Product
Progetto: Invoice Manager

Definisce gli endpoint API per la gestione del catalogo prodotti.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from invoice_app.core.deps import Store, get_product_service
from invoice_app.schemas.product import Product, ProductCreate, ProductUpdate
from invoice_app.services.product_service import ProductService

# Router con prefix e tag
router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


@router.get(
    "/",
    name="products_list",
    summary="Lista prodotti",
    response_model=list[Product],
)
async def get_products(
    store: Store,
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    return await service.get_all(store)


@router.get(
    "/{product_id}",
    name="product_detail",
    summary="Dettaglio prodotto",
    response_model=Product,
)
async def get_product(
    product_id: str,
    store: Store,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """
    Raises:
        NotFoundError: Se il prodotto non esiste
    """
    return await service.get_by_id(store, product_id)


@router.post(
    "/",
    name="product_create",
    summary="Crea prodotto",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    data: ProductCreate,
    request: Request,
    response: Response,
    store: Store,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """
    Crea un prodotto. Dopo la creazione il frontend torna alla lista prodotti.

    Raises:
        BusinessValidationError: nome mancante o prezzo <= 0
    """
    product = await service.create(store, data)
    response.headers["Location"] = request.app.url_path_for("products_list")
    return product


@router.put(
    "/{product_id}",
    name="product_update",
    summary="Aggiorna prodotto",
    response_model=Product,
)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    store: Store,
    service: ProductService = Depends(get_product_service),
) -> Product:
    return await service.update(store, product_id, data)


@router.delete(
    "/{product_id}",
    name="product_delete",
    summary="Elimina prodotto",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_product(
    product_id: str,
    store: Store,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Le fatture che usano il prodotto mostreranno "Unknown Product"."""
    await service.delete(store, product_id)
