"""Routes Trajets / Trip API routes."""

from fastapi import APIRouter, Depends

from gasoil.api.deps import get_store
from gasoil.schemas.trip import TripCreate, TripRead
from gasoil.services.fleet_store import FleetStore

router = APIRouter()


@router.get("/", response_model=list[TripRead])
async def list_trips(store: FleetStore = Depends(get_store)):
    """Lister les trajets par date DESC / List trips by date DESC."""
    return await store.list_trips()


@router.post("/", response_model=TripRead, status_code=201)
async def create_trip(data: TripCreate, store: FleetStore = Depends(get_store)):
    """Enregistrer un trajet brut / Save a raw trip record.

    Les valeurs calculees sont stockees telles quelles ; utiliser
    /api/calculator/trips pour un calcul cote serveur.
    Computed values are stored as sent; use /api/calculator/trips to
    compute them server-side.
    """
    dump = data.model_dump()
    dump["date"] = data.date.isoformat()
    dump["status"] = data.status.value if data.status else None
    return await store.create_trip(dump)
