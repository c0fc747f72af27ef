"""
Main Entry Point - FastAPI Application
Progetto: Invoice Manager

Configura l'applicazione FastAPI con middleware, router e lifecycle.
L'archivio dati è creato nel lifespan e appartiene all'applicazione
(``app.state.store``): nessun archivio globale a livello di modulo.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoice_app.api.v1 import api_v1_router
from invoice_app.core.config import Settings, get_settings
from invoice_app.core.database import build_engine, build_session_factory, close_db, init_db
from invoice_app.core.exceptions import AppException
from invoice_app.core.store import DataStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ------------------------------------------------------------
# Exception Handlers
# ------------------------------------------------------------
async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Gestore per tutte le eccezioni applicative.

    Converte l'eccezione nel suo status code; ``extra`` (es. gli
    errori per campo dei form) viene aggiunto al corpo della risposta.
    """
    content = {"detail": exc.detail, "error_code": exc.error_code}
    if exc.extra:
        content.update(exc.extra)
    return JSONResponse(status_code=exc.status_code, content=content)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Gestore generico per tutte le eccezioni non catturate.

    Converte l'eccezione in risposta HTTP 500 e logga l'errore.
    """
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_code": "INTERNAL_SERVER_ERROR"},
    )


# ------------------------------------------------------------
# Lifespan Handler
# ------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestisce il ciclo di vita dell'applicazione.

    - Startup: crea il database, verifica i dati salvati e inserisce
      i dati demo nelle collezioni vuote
    - Shutdown: scollega l'archivio e chiude le connessioni
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Avvio {settings.app_name} v{settings.app_version}")
    engine = build_engine(settings)
    await init_db(engine)

    store = DataStore(build_session_factory(engine), key_prefix=settings.storage_key_prefix)
    await store.verify()
    if settings.seed_demo_data:
        await store.initialize_data()

    app.state.store = store
    logger.info("Applicazione avviata con successo")

    yield

    # Shutdown
    logger.info("Arresto applicazione in corso...")
    app.state.store = None
    await close_db(engine)
    logger.info("Applicazione arrestata")


# ------------------------------------------------------------
# FastAPI Application
# ------------------------------------------------------------
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Crea l'applicazione.

    Args:
        settings: Impostazioni da usare (default: da ambiente/.env)
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Invoice Manager - Backend API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.store = None

    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Middleware CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get(
        "/health",
        name="Health Check",
        summary="Controlla lo stato dell'applicazione",
        tags=["System"],
    )
    async def health_check() -> dict[str, str]:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
        }

    app.include_router(api_v1_router)
    return app


app = create_app()
