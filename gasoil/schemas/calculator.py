"""Schémas Calculateur / Calculator schemas."""

from datetime import date

from pydantic import BaseModel


class CalculationRequest(BaseModel):
    """Relevés bruts ; les champs utiles dépendent du type du véhicule.
    Raw readings; which fields matter depends on the vehicle type.
    """
    vehicle_id: int
    fuel: float | str | None = None
    km_start: float | None = None
    km_end: float | None = None
    distance: float | None = None
    hours_start: float | None = None
    hours_end: float | None = None
    hours: float | None = None


class TripSubmission(CalculationRequest):
    date: date


class CalculationResult(BaseModel):
    vehicle_id: int
    plate: str
    rate: float
    unit: str
    status: str
    max_conso: float
    fuel: float
    distance: float | None = None
    hours: float | None = None
