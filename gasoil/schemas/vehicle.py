"""Schémas Véhicule / Vehicle schemas."""

from pydantic import BaseModel, ConfigDict, Field

from gasoil.models.vehicle import VehicleType


class VehicleCreate(BaseModel):
    plate: str = Field(min_length=1, max_length=20)
    company: str = Field(min_length=1, max_length=150)
    driver: str = Field(min_length=1, max_length=150)
    type: VehicleType
    max_conso: float = Field(gt=0)


class VehicleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    plate: str
    company: str
    driver: str
    # Anciens libelles acceptes en lecture / Legacy labels accepted on read
    type: str
    max_conso: float
    unit: str | None = None
