"""
Dépendances des routes / Route dependencies.
Injectées dans les routes via Depends().
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gasoil.database import get_db
from gasoil.services.fleet_store import FleetSnapshot, FleetStore


def get_store(db: AsyncSession = Depends(get_db)) -> FleetStore:
    """Store lié à la session de la requête / Store bound to the request session."""
    return FleetStore(db)


async def get_snapshot(store: FleetStore = Depends(get_store)) -> FleetSnapshot:
    """Instantané unique par requête / One snapshot per request."""
    return await store.snapshot()
