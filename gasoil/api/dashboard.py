"""Routes Tableau de bord / Dashboard routes."""

from fastapi import APIRouter, Depends

from gasoil.api.deps import get_snapshot
from gasoil.schemas.dashboard import AlertRead, DashboardRead, NotificationRead
from gasoil.services.consumption import ConsumptionEngine
from gasoil.services.fleet_store import FleetSnapshot

router = APIRouter()


@router.get("/", response_model=DashboardRead)
async def get_dashboard(snapshot: FleetSnapshot = Depends(get_snapshot)):
    """Chiffres du tableau de bord / Dashboard figures."""
    return ConsumptionEngine.aggregate(snapshot.trips, snapshot.vehicles)


@router.get("/alerts", response_model=list[AlertRead])
async def list_alerts(snapshot: FleetSnapshot = Depends(get_snapshot)):
    """Detail des depassements / Overage details."""
    return ConsumptionEngine.resolve_alerts(snapshot.trips, snapshot.catalog)


@router.get("/notifications", response_model=NotificationRead)
async def get_notifications(snapshot: FleetSnapshot = Depends(get_snapshot)):
    """Resume des alertes / Alert summary."""
    alerts = ConsumptionEngine.resolve_alerts(snapshot.trips, snapshot.catalog)
    return NotificationRead(count=len(alerts), message=ConsumptionEngine.alert_summary(alerts))
