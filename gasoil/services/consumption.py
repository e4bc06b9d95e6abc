"""
Moteur de consommation / Consumption engine.
Calcule la consommation d'un trajet, son verdict et les agregats du tableau de bord.
Computes a trip's consumption rate, its verdict and the dashboard aggregates.

Calcul pur : aucune E/S, aucune mutation des entrees.
Pure computation: no I/O, inputs are never mutated.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable

from gasoil.exceptions import InvalidInputError, MissingInputError
from gasoil.models.trip import TripStatus
from gasoil.models.vehicle import VehicleType
from gasoil.services.vehicle_catalog import UNIT_PER_100KM, UNIT_PER_HOUR, VehicleCatalog

# Constantes / Constants
RECENT_SERIES_SIZE = 10         # fenetre glissante fixe / fixed trailing window
UNKNOWN_VEHICLE = "Unknown vehicle"
TYPE_ORDER = tuple(t.value for t in VehicleType)
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _to_float(value: Any) -> float | None:
    """Convertir en nombre fini, sinon None / Coerce to a finite float, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _delta(start: Any, end: Any) -> float | None:
    """Ecart fin - debut, None si absent ou non positif / end - start, None unless positive."""
    s, e = _to_float(start), _to_float(end)
    if s is None or e is None or e <= s:
        return None
    return e - s


def _enum_value(value: Any) -> str:
    return value.value if hasattr(value, "value") else str(value)


def parse_trip_date(value: Any) -> date | None:
    """Date d'un trajet (date, datetime ou 'YYYY-MM-DD...') / Trip date from date, datetime or ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def short_date(value: Any) -> str:
    """Libelle court '5 Jan' / Short label '5 Jan'."""
    parsed = parse_trip_date(value)
    if parsed is None:
        return str(value or "")
    return f"{parsed.day} {MONTH_ABBR[parsed.month - 1]}"


# ── Releves (variante taguee) / Readings (tagged variant) ────────────


@dataclass(frozen=True)
class DistanceReadings:
    """Releves kilometriques / Odometer readings (every type except Refrigerated)."""
    fuel: Any
    km_start: Any = None
    km_end: Any = None
    distance: Any = None            # saisie directe, prioritaire / direct entry wins

    @property
    def measure(self) -> float | None:
        if self.distance is not None:
            direct = _to_float(self.distance)
            return direct if direct is not None and direct > 0 else None
        return _delta(self.km_start, self.km_end)


@dataclass(frozen=True)
class DurationReadings:
    """Releves horaires du groupe froid / Reefer hour-meter readings."""
    fuel: Any
    hours_start: Any = None
    hours_end: Any = None
    hours: Any = None               # saisie directe, prioritaire / direct entry wins

    @property
    def measure(self) -> float | None:
        if self.hours is not None:
            direct = _to_float(self.hours)
            return direct if direct is not None and direct > 0 else None
        return _delta(self.hours_start, self.hours_end)


Readings = DistanceReadings | DurationReadings


def readings_for_vehicle(
    vehicle: Any,
    fuel: Any,
    km_start: Any = None,
    km_end: Any = None,
    distance: Any = None,
    hours_start: Any = None,
    hours_end: Any = None,
    hours: Any = None,
) -> Readings:
    """Choisir la variante selon le type du vehicule / Pick the variant from the vehicle type."""
    if VehicleCatalog.uses_hours(vehicle):
        return DurationReadings(fuel=fuel, hours_start=hours_start, hours_end=hours_end, hours=hours)
    return DistanceReadings(fuel=fuel, km_start=km_start, km_end=km_end, distance=distance)


# ── Resultats / Results ──────────────────────────────────────────────


@dataclass(frozen=True)
class TripResult:
    """Resultat du calcul d'un trajet / Computed trip result."""
    vehicle_id: int
    rate: float
    unit: str
    status: TripStatus
    fuel: float
    max_conso: float
    distance: float | None = None
    hours: float | None = None


@dataclass(frozen=True)
class SeriesPoint:
    label: str
    fuel: float


@dataclass(frozen=True)
class AlertDetail:
    vehicle_id: int | None
    plate: str
    date: str
    consumption: float | None


@dataclass
class DashboardStats:
    """Chiffres du tableau de bord / Dashboard figures."""
    total_fuel: float = 0.0
    total_trip_count: int = 0
    alert_count: int = 0
    vehicle_count: int = 0
    recent_series: list[SeriesPoint] = field(default_factory=list)
    type_distribution: dict[str, int] = field(default_factory=lambda: dict.fromkeys(TYPE_ORDER, 0))


class ConsumptionEngine:
    """Regles de consommation et d'alerte / Consumption and alerting rules."""

    @staticmethod
    def compute_trip(readings: Readings, vehicle: Any) -> TripResult:
        """
        Calculer la consommation d'un trajet / Compute a trip's consumption.
        Frigo : carburant / heures (L/H). Autres : carburant / distance * 100 (L/100km).
        Depassement si taux > max_conso ; l'egalite reste Normal.
        Overage when rate > max_conso; equality stays Normal.
        """
        by_hours = VehicleCatalog.uses_hours(vehicle)
        expected = DurationReadings if by_hours else DistanceReadings
        if not isinstance(readings, expected):
            raise MissingInputError(
                f"{vehicle.type} vehicles need {'hour' if by_hours else 'distance'} readings"
            )

        measure = readings.measure
        if measure is None:
            raise MissingInputError("Hours are required" if by_hours else "Distance is required")

        fuel = _to_float(readings.fuel)
        if fuel is None or fuel <= 0:
            raise InvalidInputError("Fuel must be a positive number")

        max_conso = _to_float(vehicle.max_conso)
        if max_conso is None:
            raise InvalidInputError(f"Vehicle {vehicle.plate} has no maximum consumption")

        if by_hours:
            rate = fuel / measure
            unit = UNIT_PER_HOUR
        else:
            rate = (fuel / measure) * 100
            unit = UNIT_PER_100KM

        return TripResult(
            vehicle_id=vehicle.id,
            rate=rate,
            unit=unit,
            status=TripStatus.OVERAGE if rate > max_conso else TripStatus.NORMAL,
            fuel=fuel,
            max_conso=max_conso,
            distance=None if by_hours else measure,
            hours=measure if by_hours else None,
        )

    @staticmethod
    def is_overage(trip: Any) -> bool:
        """Trajet en depassement ; statut absent = ignore / Overage trip; missing status is skipped."""
        status = getattr(trip, "status", None)
        if not status:
            return False
        return _enum_value(status).strip().lower() == TripStatus.OVERAGE.value.lower()

    @staticmethod
    def aggregate(trips: Iterable[Any], vehicles: Iterable[Any]) -> DashboardStats:
        """Agregats du tableau de bord / Dashboard aggregates. Never raises on empty input."""
        trips = list(trips)
        vehicles = list(vehicles)

        stats = DashboardStats(
            total_trip_count=len(trips),
            vehicle_count=len(vehicles),
        )
        stats.total_fuel = sum((_to_float(getattr(t, "fuel", None)) or 0.0) for t in trips)
        stats.alert_count = sum(1 for t in trips if ConsumptionEngine.is_overage(t))

        # Tri stable par date, dates illisibles en tete / Stable date sort, unreadable dates first
        ordered = sorted(trips, key=lambda t: parse_trip_date(getattr(t, "date", None)) or date.min)
        stats.recent_series = [
            SeriesPoint(
                label=short_date(getattr(t, "date", None)),
                fuel=_to_float(getattr(t, "fuel", None)) or 0.0,
            )
            for t in ordered[-RECENT_SERIES_SIZE:]
        ]

        for vehicle in vehicles:
            vtype = _enum_value(vehicle.type) if vehicle.type is not None else None
            if vtype in stats.type_distribution:
                stats.type_distribution[vtype] += 1

        return stats

    @staticmethod
    def resolve_alerts(trips: Iterable[Any], vehicles: Iterable[Any]) -> list[AlertDetail]:
        """Detail des depassements / Overage details with the vehicle plate resolved."""
        catalog = vehicles if isinstance(vehicles, VehicleCatalog) else VehicleCatalog(vehicles)
        alerts = []
        for trip in trips:
            if not ConsumptionEngine.is_overage(trip):
                continue
            vehicle = catalog.get(getattr(trip, "vehicle_id", None))
            alerts.append(AlertDetail(
                vehicle_id=getattr(trip, "vehicle_id", None),
                plate=vehicle.plate if vehicle is not None else UNKNOWN_VEHICLE,
                date=str(getattr(trip, "date", "") or ""),
                consumption=_to_float(getattr(trip, "consumption", None)),
            ))
        return alerts

    @staticmethod
    def alert_summary(alerts: list[AlertDetail]) -> str:
        """Texte de notification / Notification text."""
        if not alerts:
            return "No overconsumption alert for now."
        lines = [f"Overconsumption alerts ({len(alerts)})", ""]
        for alert in alerts:
            conso = f"{alert.consumption:.1f}" if alert.consumption is not None else "n/a"
            lines.append(f"- {alert.plate} on {alert.date} (consumption: {conso})")
        return "\n".join(lines)
