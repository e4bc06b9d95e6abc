"""Modele Trajet / Trip model."""

import enum

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gasoil.database import Base


class TripStatus(str, enum.Enum):
    """Verdict de consommation / Consumption verdict."""
    NORMAL = "Normal"
    OVERAGE = "Overage"


class Trip(Base):
    """Trajet enregistre / Recorded trip.

    vehicle_id est une reference faible (pas de FK) : un trajet peut survivre
    a la suppression de son vehicule.
    vehicle_id is a weak reference (no FK): a trip may outlive its vehicle.
    """
    __tablename__ = "trips"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    vehicle_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    distance: Mapped[float | None] = mapped_column(Float)  # km
    hours: Mapped[float | None] = mapped_column(Float)
    fuel: Mapped[float] = mapped_column(Float, nullable=False)  # litres
    consumption: Mapped[float | None] = mapped_column(Float)
    # Absent sur les anciens enregistrements / Missing on legacy records
    status: Mapped[str | None] = mapped_column(String(20))

    def __repr__(self) -> str:
        return f"<Trip {self.date} - vehicle {self.vehicle_id} - {self.status}>"
