"""
Router FastAPI per i dati aziendali
Progetto: Invoice Manager
"""

from fastapi import APIRouter, Depends

from invoice_app.core.deps import Store, get_company_service
from invoice_app.schemas.company import CompanyInfo
from invoice_app.services.company_service import CompanyService

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
)


@router.get(
    "/company",
    name="company_detail",
    summary="Dati azienda",
    description="Intestazione usata nei PDF. Se mai salvata, restituisce i valori di default.",
    response_model=CompanyInfo,
)
async def get_company(
    store: Store,
    service: CompanyService = Depends(get_company_service),
) -> CompanyInfo:
    return await service.get(store)


@router.put(
    "/company",
    name="company_update",
    summary="Salva dati azienda",
    response_model=CompanyInfo,
)
async def save_company(
    data: CompanyInfo,
    store: Store,
    service: CompanyService = Depends(get_company_service),
) -> CompanyInfo:
    return await service.save(store, data)
