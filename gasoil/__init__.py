"""Gasoil Manager - suivi de consommation carburant / fleet fuel-consumption tracker."""
