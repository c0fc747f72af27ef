"""
API v1 Routes
Progetto: Invoice Manager

Router versione 1 dell'API.
"""

from fastapi import APIRouter

from invoice_app.api.v1 import clients, company, dashboard, invoices, products

# Router aggregato per v1
api_v1_router = APIRouter(prefix="/api/v1")

# Includi i router dei moduli
api_v1_router.include_router(dashboard.router)
api_v1_router.include_router(clients.router)
api_v1_router.include_router(products.router)
api_v1_router.include_router(invoices.router)
api_v1_router.include_router(company.router)

# Esportazione
__all__ = ["api_v1_router"]
