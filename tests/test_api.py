"""Tests API / API tests."""

import pytest

CAR = {"plate": "AB-123", "company": "Transports Nord", "driver": "Karim", "type": "Car", "max_conso": 10}
FRIGO = {"plate": "FR-001", "company": "Froid Express", "driver": "Sofia", "type": "Refrigerated", "max_conso": 5}


async def _create(client, payload):
    resp = await client.post("/api/vehicles/", json=payload)
    assert resp.status_code == 201
    return resp.json()


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"
    assert "X-Request-ID" in resp.headers


@pytest.mark.asyncio
async def test_create_and_list_vehicles(client):
    car = await _create(client, CAR)
    assert car["unit"] == "L/100km"
    frigo = await _create(client, FRIGO)
    assert frigo["unit"] == "L/H"

    resp = await client.get("/api/vehicles/")
    assert resp.status_code == 200
    # Plus recents d'abord / Newest first
    assert [v["plate"] for v in resp.json()] == ["FR-001", "AB-123"]

    resp = await client.get("/api/vehicles/", params={"search": "karim"})
    assert [v["plate"] for v in resp.json()] == ["AB-123"]


@pytest.mark.asyncio
async def test_duplicate_plate_conflict(client):
    await _create(client, CAR)
    resp = await client.post("/api/vehicles/", json=CAR)
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_unknown_vehicle_type_rejected(client):
    resp = await client.post("/api/vehicles/", json={**CAR, "type": "Bus"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_plate_lookup(client):
    car = await _create(client, CAR)
    resp = await client.get("/api/vehicles/lookup", params={"plate": "ab"})
    assert resp.status_code == 200
    assert resp.json()["id"] == car["id"]

    resp = await client.get("/api/vehicles/lookup", params={"plate": "zz"})
    assert resp.status_code == 404

    resp = await client.get("/api/vehicles/lookup", params={"plate": "  "})
    assert resp.status_code == 204


@pytest.mark.asyncio
async def test_delete_vehicle(client):
    car = await _create(client, CAR)
    resp = await client.delete(f"/api/vehicles/{car['id']}")
    assert resp.status_code == 204
    resp = await client.get(f"/api/vehicles/{car['id']}")
    assert resp.status_code == 404
    resp = await client.delete(f"/api/vehicles/{car['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_compute_preview_persists_nothing(client):
    car = await _create(client, CAR)
    resp = await client.post(
        "/api/calculator/compute",
        json={"vehicle_id": car["id"], "fuel": 6, "km_start": 1000, "km_end": 1050},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["rate"] == pytest.approx(12.0)
    assert data["unit"] == "L/100km"
    assert data["status"] == "Overage"
    assert data["distance"] == 50

    resp = await client.get("/api/trips/")
    assert resp.json() == []


@pytest.mark.asyncio
async def test_submit_refrigerated_trip(client):
    frigo = await _create(client, FRIGO)
    resp = await client.post(
        "/api/calculator/trips",
        json={"vehicle_id": frigo["id"], "date": "2024-04-02", "fuel": 30, "hours": 8},
    )
    assert resp.status_code == 201
    trip = resp.json()
    assert trip["consumption"] == pytest.approx(3.75)
    assert trip["status"] == "Normal"
    assert trip["hours"] == 8
    assert trip["distance"] is None


@pytest.mark.asyncio
async def test_submit_rejected_writes_nothing(client):
    car = await _create(client, CAR)
    resp = await client.post(
        "/api/calculator/trips",
        json={"vehicle_id": car["id"], "date": "2024-04-02", "fuel": 30, "km_start": 900, "km_end": 800},
    )
    assert resp.status_code == 422
    resp = await client.post(
        "/api/calculator/trips",
        json={"vehicle_id": car["id"], "date": "2024-04-02", "fuel": 0, "distance": 80},
    )
    assert resp.status_code == 422
    resp = await client.get("/api/trips/")
    assert resp.json() == []


@pytest.mark.asyncio
async def test_compute_unknown_vehicle(client):
    resp = await client.post("/api/calculator/compute", json={"vehicle_id": 404, "fuel": 6, "distance": 50})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_dashboard_and_alerts(client):
    car = await _create(client, CAR)
    frigo = await _create(client, FRIGO)
    for payload in (
        {"vehicle_id": car["id"], "date": "2024-04-01", "fuel": 6, "distance": 50},
        {"vehicle_id": car["id"], "date": "2024-04-03", "fuel": 8, "distance": 100},
        {"vehicle_id": frigo["id"], "date": "2024-04-02", "fuel": 30, "hours": 8},
    ):
        resp = await client.post("/api/calculator/trips", json=payload)
        assert resp.status_code == 201
    # Ancien trajet sans statut / Legacy trip without status
    resp = await client.post("/api/trips/", json={"vehicle_id": car["id"], "date": "2024-03-30", "fuel": 4})
    assert resp.status_code == 201

    resp = await client.get("/api/trips/")
    assert [t["date"] for t in resp.json()] == ["2024-04-03", "2024-04-02", "2024-04-01", "2024-03-30"]

    resp = await client.get("/api/dashboard/")
    assert resp.status_code == 200
    stats = resp.json()
    assert stats["total_fuel"] == pytest.approx(48)
    assert stats["total_trip_count"] == 4
    assert stats["alert_count"] == 1
    assert stats["vehicle_count"] == 2
    assert [p["label"] for p in stats["recent_series"]] == ["30 Mar", "1 Apr", "2 Apr", "3 Apr"]
    assert stats["type_distribution"] == {"Truck": 0, "Car": 1, "Van": 0, "Refrigerated": 1}

    resp = await client.get("/api/dashboard/alerts")
    alerts = resp.json()
    assert len(alerts) == 1
    assert alerts[0]["plate"] == "AB-123"
    assert alerts[0]["consumption"] == pytest.approx(12.0)

    # Vehicule supprime : le trajet reste / Deleted vehicle: the trip stays
    await client.delete(f"/api/vehicles/{car['id']}")
    resp = await client.get("/api/dashboard/notifications")
    data = resp.json()
    assert data["count"] == 1
    assert "Unknown vehicle" in data["message"]


@pytest.mark.asyncio
async def test_exports(client):
    car = await _create(client, CAR)
    await client.post("/api/calculator/trips", json={"vehicle_id": car["id"], "date": "2024-04-01", "fuel": 6, "distance": 50})

    resp = await client.get("/api/exports/vehicles")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    lines = resp.content.decode("utf-8-sig").splitlines()
    assert lines[0] == "plate,company,driver,type,max_conso"
    assert lines[1].startswith("AB-123,Transports Nord,Karim,Car,")

    resp = await client.get("/api/exports/trips", params={"format": "xlsx"})
    assert resp.status_code == 200
    assert resp.content[:2] == b"PK"

    resp = await client.get("/api/exports/drivers")
    assert resp.status_code == 400
