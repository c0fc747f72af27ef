"""
Service Layer per i dati dell'azienda emittente
Progetto: Invoice Manager
"""

import logging

from invoice_app.core.store import DataStore
from invoice_app.schemas.company import CompanyInfo

logger = logging.getLogger(__name__)


class CompanyService:
    """Lettura e scrittura del profilo aziendale (record unico, sempre per intero)."""

    async def get(self, store: DataStore) -> CompanyInfo:
        return await store.get_company_info()

    async def save(self, store: DataStore, company_info: CompanyInfo) -> CompanyInfo:
        await store.save_company_info(company_info)
        logger.info("Salvati dati azienda: %s", company_info.name)
        return company_info
