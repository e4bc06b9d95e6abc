"""Modele Vehicule / Vehicle model."""

import enum

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from gasoil.database import Base


class VehicleType(str, enum.Enum):
    """Type de vehicule (ensemble ferme) / Vehicle type (closed set).

    Libelles historiques : Camion / Voiture / Fourgon / Frigo.
    """
    TRUCK = "Truck"
    CAR = "Car"
    VAN = "Van"
    REFRIGERATED = "Refrigerated"


class Vehicle(Base):
    """Vehicule du parc / Fleet vehicle."""
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    plate: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    company: Mapped[str] = mapped_column(String(150), nullable=False)
    driver: Mapped[str] = mapped_column(String(150), nullable=False)
    # Chaine libre en base, valide a la creation / Free string in DB, validated on create
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    # L/100km, ou L/h pour les frigos / L/100km, or L/h for refrigerated units
    max_conso: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Vehicle {self.plate} ({self.type})>"
