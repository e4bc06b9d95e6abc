"""
Stockage de la flotte / Fleet store.
Acces SQLAlchemy aux vehicules et trajets, et instantane coherent pour le moteur.
SQLAlchemy access to vehicles and trips, plus a consistent snapshot for the engine.

Les erreurs de la base remontent telles quelles, sans nouvelle tentative.
Database errors propagate unchanged, never retried.
"""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gasoil.exceptions import VehicleNotFoundError
from gasoil.models.trip import Trip
from gasoil.models.vehicle import Vehicle
from gasoil.services.consumption import TripResult
from gasoil.services.vehicle_catalog import VehicleCatalog

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FleetSnapshot:
    """Vue figee (vehicules, trajets) / Frozen (vehicles, trips) view."""
    vehicles: tuple[Vehicle, ...]
    trips: tuple[Trip, ...]

    @property
    def catalog(self) -> VehicleCatalog:
        return VehicleCatalog(self.vehicles)


class FleetStore:
    """Operations de persistance / Persistence operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_vehicles(self) -> list[Vehicle]:
        """Vehicules, plus recents d'abord / Vehicles, newest first."""
        result = await self.db.execute(select(Vehicle).order_by(Vehicle.id.desc()))
        return list(result.scalars().all())

    async def list_trips(self) -> list[Trip]:
        """Trajets par date decroissante / Trips by date DESC."""
        result = await self.db.execute(select(Trip).order_by(Trip.date.desc(), Trip.id.desc()))
        return list(result.scalars().all())

    async def snapshot(self) -> FleetSnapshot:
        vehicles = await self.list_vehicles()
        trips = await self.list_trips()
        return FleetSnapshot(vehicles=tuple(vehicles), trips=tuple(trips))

    async def get_vehicle(self, vehicle_id: int) -> Vehicle:
        vehicle = await self.db.get(Vehicle, vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found")
        return vehicle

    async def create_vehicle(self, data: dict[str, Any]) -> Vehicle:
        """Enregistrer un vehicule / Register a vehicle. IntegrityError on duplicate plate."""
        vehicle = Vehicle(**data)
        self.db.add(vehicle)
        await self.db.flush()
        await self.db.refresh(vehicle)
        log.info("Vehicle %s registered (id=%s)", vehicle.plate, vehicle.id)
        return vehicle

    async def delete_vehicle(self, vehicle_id: int) -> None:
        """Supprimer un vehicule, ses trajets restent / Delete a vehicle, its trips are kept."""
        vehicle = await self.get_vehicle(vehicle_id)
        await self.db.delete(vehicle)
        await self.db.flush()
        log.info("Vehicle %s deleted (id=%s)", vehicle.plate, vehicle_id)

    async def create_trip(self, data: dict[str, Any]) -> Trip:
        trip = Trip(**data)
        self.db.add(trip)
        await self.db.flush()
        await self.db.refresh(trip)
        log.info("Trip %s saved for vehicle %s (%s)", trip.id, trip.vehicle_id, trip.status)
        return trip

    async def record_trip(self, result: TripResult, trip_date: str) -> Trip:
        """Persister un resultat calcule / Persist a computed result."""
        return await self.create_trip({
            "vehicle_id": result.vehicle_id,
            "date": trip_date,
            "distance": result.distance,
            "hours": result.hours,
            "fuel": result.fuel,
            "consumption": result.rate,
            "status": result.status.value,
        })
