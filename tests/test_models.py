"""Tests des modèles / Model tests."""

from gasoil.models.trip import Trip, TripStatus
from gasoil.models.vehicle import Vehicle, VehicleType


def test_vehicle_repr():
    v = Vehicle(id=1, plate="AB-123", company="Transports Nord", driver="Karim", type="Car", max_conso=8)
    assert "AB-123" in repr(v)


def test_trip_repr():
    t = Trip(id=3, vehicle_id=1, date="2024-05-02", fuel=40, status="Normal")
    assert "2024-05-02" in repr(t)


def test_enums():
    assert [t.value for t in VehicleType] == ["Truck", "Car", "Van", "Refrigerated"]
    assert TripStatus.OVERAGE.value == "Overage"
    assert TripStatus.NORMAL == "Normal"
