"""Routes Vehicules / Vehicle API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import IntegrityError

from gasoil.api.deps import get_snapshot, get_store
from gasoil.exceptions import VehicleNotFoundError
from gasoil.models.vehicle import Vehicle
from gasoil.schemas.vehicle import VehicleCreate, VehicleRead
from gasoil.services.fleet_store import FleetSnapshot, FleetStore
from gasoil.services.vehicle_catalog import VehicleCatalog

router = APIRouter()


def _to_read(vehicle: Vehicle) -> VehicleRead:
    read = VehicleRead.model_validate(vehicle)
    read.unit = VehicleCatalog.unit_for(vehicle)
    return read


@router.get("/", response_model=list[VehicleRead])
async def list_vehicles(
    search: str | None = None,
    snapshot: FleetSnapshot = Depends(get_snapshot),
):
    """Lister les vehicules (filtre optionnel) / List vehicles (optional filter)."""
    return [_to_read(v) for v in snapshot.catalog.search(search)]


@router.get("/lookup", response_model=VehicleRead)
async def lookup_vehicle(
    plate: str = Query("", description="Debut du matricule / Plate prefix"),
    snapshot: FleetSnapshot = Depends(get_snapshot),
):
    """Autocompletion du matricule / Plate autocomplete."""
    try:
        vehicle = snapshot.catalog.find_by_plate_prefix(plate)
    except VehicleNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    if vehicle is None:
        return Response(status_code=204)
    return _to_read(vehicle)


@router.get("/{vehicle_id}", response_model=VehicleRead)
async def get_vehicle(vehicle_id: int, store: FleetStore = Depends(get_store)):
    """Voir un vehicule / Get vehicle detail."""
    try:
        vehicle = await store.get_vehicle(vehicle_id)
    except VehicleNotFoundError:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return _to_read(vehicle)


@router.post("/", response_model=VehicleRead, status_code=201)
async def create_vehicle(data: VehicleCreate, store: FleetStore = Depends(get_store)):
    """Creer un vehicule / Create vehicle."""
    dump = data.model_dump()
    dump["type"] = data.type.value
    dump["plate"] = data.plate.strip()
    try:
        vehicle = await store.create_vehicle(dump)
    except IntegrityError:
        await store.db.rollback()
        raise HTTPException(status_code=409, detail=f"Plate '{dump['plate']}' already exists")
    return _to_read(vehicle)


@router.delete("/{vehicle_id}", status_code=204)
async def delete_vehicle(vehicle_id: int, store: FleetStore = Depends(get_store)):
    """Supprimer un vehicule / Delete vehicle."""
    try:
        await store.delete_vehicle(vehicle_id)
    except VehicleNotFoundError:
        raise HTTPException(status_code=404, detail="Vehicle not found")
