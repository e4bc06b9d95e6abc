"""Erreurs du domaine / Domain errors.

Levees par le catalogue et le moteur de consommation, traduites en
HTTPException par les routes.
Raised by the catalog and the consumption engine, translated to
HTTPException by the routes.
"""


class GasoilError(Exception):
    """Erreur metier de base / Base domain error."""


class MissingInputError(GasoilError):
    """Champ numerique absent ou delta non positif / Missing field or non-positive delta."""


class InvalidInputError(GasoilError):
    """Carburant non numerique ou <= 0 / Non-numeric or non-positive fuel."""


class VehicleNotFoundError(GasoilError, LookupError):
    """Aucun vehicule pour ce matricule ou cet id / No vehicle for this plate or id."""
