"""
Catalogue des vehicules / Vehicle catalog.
Recherche en memoire par matricule ou id sur un instantane de la flotte.
In-memory lookup by plate or id over a fleet snapshot.
"""

from collections.abc import Iterable
from typing import Any

from gasoil.exceptions import VehicleNotFoundError
from gasoil.models.vehicle import VehicleType

UNIT_PER_100KM = "L/100km"
UNIT_PER_HOUR = "L/H"


class VehicleCatalog:
    """Recherche de vehicules en lecture seule / Read-only vehicle lookup.

    Le catalogue n'est jamais mis a jour : l'appelant en reconstruit un
    nouveau apres chaque ajout ou suppression.
    Never updated in place: the caller builds a new one after each add/delete.
    """

    def __init__(self, vehicles: Iterable[Any]):
        self._vehicles = tuple(vehicles)
        self._by_id: dict[Any, Any] = {}
        for vehicle in self._vehicles:
            self._by_id.setdefault(vehicle.id, vehicle)

    def find_by_plate_prefix(self, text: str | None):
        """Autocompletion du matricule / Plate autocomplete.

        Premier vehicule (ordre de l'instantane) dont le matricule commence par
        la saisie, sans tenir compte de la casse. Saisie vide : None.
        First vehicle in snapshot order whose plate starts with the input,
        case-insensitive. Blank input returns None.
        """
        needle = (text or "").strip().lower()
        if not needle:
            return None
        for vehicle in self._vehicles:
            if (vehicle.plate or "").lower().startswith(needle):
                return vehicle
        raise VehicleNotFoundError(f"No vehicle plate starts with '{text.strip()}'")

    def find_by_id(self, vehicle_id: int):
        """Vehicule par id / Vehicle by id."""
        vehicle = self._by_id.get(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found")
        return vehicle

    def get(self, vehicle_id: int | None):
        return self._by_id.get(vehicle_id)

    def search(self, term: str | None) -> list:
        """Filtre matricule / chauffeur / societe / Plate, driver or company filter."""
        needle = (term or "").strip().lower()
        if not needle:
            return list(self._vehicles)
        return [
            v for v in self._vehicles
            if needle in (v.plate or "").lower()
            or needle in (v.driver or "").lower()
            or needle in (v.company or "").lower()
        ]

    @staticmethod
    def uses_hours(vehicle: Any) -> bool:
        """Frigo : mesure a l'heure / Refrigerated units are measured per hour."""
        return vehicle.type == VehicleType.REFRIGERATED.value

    @classmethod
    def unit_for(cls, vehicle: Any) -> str:
        return UNIT_PER_HOUR if cls.uses_hours(vehicle) else UNIT_PER_100KM
