"""
Dependency Injection per archivio e service
Progetto: Invoice Manager
"""

from typing import Annotated

from fastapi import Depends, Request

from invoice_app.core.config import Settings, get_settings
from invoice_app.core.exceptions import StoreNotInitializedError
from invoice_app.core.store import DataStore
from invoice_app.services.client_service import ClientService
from invoice_app.services.company_service import CompanyService
from invoice_app.services.dashboard_service import DashboardService
from invoice_app.services.invoice_service import InvoiceService
from invoice_app.services.pdf_service import PdfService
from invoice_app.services.product_service import ProductService


def get_app_settings(request: Request) -> Settings:
    """Settings dell'applicazione corrente (quelle passate a create_app)."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_store(request: Request) -> DataStore:
    """
    Archivio posseduto dall'applicazione.

    Raises:
        StoreNotInitializedError: se chiamata fuori dal lifespan
            dell'app (nessun archivio collegato). È un errore di
            programmazione, non una condizione da gestire.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreNotInitializedError(
            "DataStore is not available: get_store must be used within the application lifespan"
        )
    return store


def get_client_service() -> ClientService:
    return ClientService()


def get_product_service() -> ProductService:
    return ProductService()


def get_company_service() -> CompanyService:
    return CompanyService()


def get_dashboard_service() -> DashboardService:
    return DashboardService()


def get_invoice_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> InvoiceService:
    return InvoiceService(payment_terms_days=settings.default_payment_terms_days)


def get_pdf_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> PdfService:
    return PdfService(currency_symbol=settings.currency_symbol)


# Type aliases per uso comune
Store = Annotated[DataStore, Depends(get_store)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]


__all__ = [
    "AppSettings",
    "Store",
    "get_app_settings",
    "get_client_service",
    "get_company_service",
    "get_dashboard_service",
    "get_invoice_service",
    "get_pdf_service",
    "get_product_service",
    "get_store",
]
