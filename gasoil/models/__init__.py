"""
Modèles SQLAlchemy / SQLAlchemy models.
Importer tous les modèles ici pour que create_all les détecte.
Import all models here so create_all can detect them.
"""

from gasoil.models.vehicle import Vehicle, VehicleType
from gasoil.models.trip import Trip, TripStatus

__all__ = [
    "Vehicle",
    "VehicleType",
    "Trip",
    "TripStatus",
]
