"""Schémas Tableau de bord / Dashboard schemas."""

from pydantic import BaseModel, ConfigDict


class SeriesPointRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    label: str
    fuel: float


class DashboardRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    total_fuel: float
    total_trip_count: int
    alert_count: int
    vehicle_count: int
    recent_series: list[SeriesPointRead]
    type_distribution: dict[str, int]


class AlertRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    vehicle_id: int | None = None
    plate: str
    date: str
    consumption: float | None = None


class NotificationRead(BaseModel):
    count: int
    message: str
