"""Schémas Trajet / Trip schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from gasoil.models.trip import TripStatus


class TripCreate(BaseModel):
    """Trajet déjà calculé par le client / Trip already computed by the client."""
    vehicle_id: int
    date: date
    distance: float | None = None
    hours: float | None = None
    fuel: float = Field(gt=0)
    consumption: float | None = None
    status: TripStatus | None = None


class TripRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    vehicle_id: int
    date: str
    distance: float | None = None
    hours: float | None = None
    fuel: float
    consumption: float | None = None
    status: str | None = None
