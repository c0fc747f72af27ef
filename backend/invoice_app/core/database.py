"""
Configurazione Database - SQLAlchemy 2.0 Async
Progetto: Invoice Manager

Definisce engine e session factory. Engine e factory sono creati dal
lifespan dell'applicazione (vedi main.py), non a livello di modulo.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from invoice_app.core.config import Settings
from invoice_app.models import Base

# Logger per questo modulo
logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Crea l'engine async a partire dalle impostazioni.

    Le opzioni del pool si applicano solo ai database server (PostgreSQL):
    SQLite via aiosqlite usa il pool di default.
    """
    options = {
        "echo": settings.debug,  # Log query in modalità debug
    }
    if not settings.is_sqlite:
        options.update(
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    return create_async_engine(settings.database_url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory legata all'engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """
    Inizializza il database.

    Verifica la connessione e crea la tabella dei record se manca.
    """
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Connessione al database stabilita con successo")
    except Exception as e:
        logger.error("Errore connessione database: %s", e)
        raise


async def reset_db(engine: AsyncEngine) -> None:
    """Elimina e ricrea tutte le tabelle (usato da reset_db.py)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tabelle ricreate")


async def close_db(engine: AsyncEngine) -> None:
    """
    Chiude le connessioni al database.

    Da chiamare durante lo shutdown dell'applicazione.
    """
    await engine.dispose()
    logger.info("Connessioni database chiuse")
