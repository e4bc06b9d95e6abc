"""Routes Export CSV/Excel / Export API routes."""

import io

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from gasoil.api.deps import get_snapshot
from gasoil.services.export_service import EXPORT_FIELDS, ExportService
from gasoil.services.fleet_store import FleetSnapshot

router = APIRouter()

ROW_BUILDERS = {
    "vehicles": ExportService.vehicle_rows,
    "trips": ExportService.trip_rows,
}


@router.get("/{entity_type}")
async def export_data(
    entity_type: str,
    format: str = Query("csv", pattern="^(csv|xlsx)$"),
    snapshot: FleetSnapshot = Depends(get_snapshot),
):
    """Exporter vehicules ou trajets / Export vehicles or trips to CSV or XLSX."""
    if entity_type not in ROW_BUILDERS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid entity type. Allowed: {list(ROW_BUILDERS.keys())}",
        )

    fields = EXPORT_FIELDS[entity_type]
    rows = ROW_BUILDERS[entity_type](snapshot)

    if format == "csv":
        content = ExportService.to_csv(rows, fields)
        media_type = "text/csv; charset=utf-8"
        filename = f"{entity_type}.csv"
    else:
        content = ExportService.to_xlsx(rows, fields, sheet_name=entity_type.capitalize())
        media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        filename = f"{entity_type}.xlsx"

    return StreamingResponse(
        io.BytesIO(content),
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
