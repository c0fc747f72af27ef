import argparse
import asyncio
import sys
import os

# Aggiungi backend/ alla PYTHONPATH per importare invoice_app.*
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "backend"))

from invoice_app.core.config import get_settings
from invoice_app.core.database import build_engine, build_session_factory, close_db, reset_db
from invoice_app.core.store import DataStore


async def reset(seed: bool):
    settings = get_settings()
    engine = build_engine(settings)
    print(f"Connessione a {settings.database_url}, ricreazione tabelle...")
    await reset_db(engine)
    if seed:
        store = DataStore(build_session_factory(engine), key_prefix=settings.storage_key_prefix)
        await store.initialize_data()
        print("Dati demo inseriti.")
    await close_db(engine)
    print("Database resettato con successo!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Svuota l'archivio delle fatture")
    parser.add_argument("--seed", action="store_true", help="reinserisce prodotti e clienti demo")
    args = parser.parse_args()
    asyncio.run(reset(args.seed))
