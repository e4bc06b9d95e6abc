"""Routes Calculateur de consommation / Consumption calculator routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from gasoil.api.deps import get_store
from gasoil.exceptions import GasoilError, VehicleNotFoundError
from gasoil.schemas.calculator import CalculationRequest, CalculationResult, TripSubmission
from gasoil.schemas.trip import TripRead
from gasoil.services.consumption import ConsumptionEngine, TripResult, readings_for_vehicle
from gasoil.services.fleet_store import FleetStore
from gasoil.services.vehicle_catalog import VehicleCatalog

logger = logging.getLogger(__name__)

router = APIRouter()


async def _compute(data: CalculationRequest, store: FleetStore):
    """Resoudre le vehicule puis calculer / Resolve the vehicle, then compute."""
    catalog = VehicleCatalog(await store.list_vehicles())
    try:
        vehicle = catalog.find_by_id(data.vehicle_id)
    except VehicleNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    readings = readings_for_vehicle(
        vehicle,
        fuel=data.fuel,
        km_start=data.km_start,
        km_end=data.km_end,
        distance=data.distance,
        hours_start=data.hours_start,
        hours_end=data.hours_end,
        hours=data.hours,
    )
    try:
        result = ConsumptionEngine.compute_trip(readings, vehicle)
    except GasoilError as exc:
        logger.info("Calculation rejected for vehicle %s: %s", vehicle.plate, exc)
        raise HTTPException(status_code=422, detail=str(exc))
    return vehicle, result


def _to_result(plate: str, result: TripResult) -> CalculationResult:
    return CalculationResult(
        vehicle_id=result.vehicle_id,
        plate=plate,
        rate=result.rate,
        unit=result.unit,
        status=result.status.value,
        max_conso=result.max_conso,
        fuel=result.fuel,
        distance=result.distance,
        hours=result.hours,
    )


@router.post("/compute", response_model=CalculationResult)
async def compute(data: CalculationRequest, store: FleetStore = Depends(get_store)):
    """Apercu du calcul, rien n'est enregistre / Preview, nothing is persisted."""
    vehicle, result = await _compute(data, store)
    return _to_result(vehicle.plate, result)


@router.post("/trips", response_model=TripRead, status_code=201)
async def submit_trip(data: TripSubmission, store: FleetStore = Depends(get_store)):
    """Calculer puis enregistrer le trajet / Compute, then save the trip.

    Aucune ecriture si le calcul echoue / Nothing is written when the computation fails.
    """
    _, result = await _compute(data, store)
    return await store.record_trip(result, data.date.isoformat())
