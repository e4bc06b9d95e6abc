"""
Service d'export CSV/Excel / CSV/Excel export service.
Construit les lignes flotte et trajets puis genere CSV ou XLSX.
Builds fleet and trip rows, then renders CSV or XLSX.
"""

import csv
import io

from openpyxl import Workbook
from openpyxl.styles import Font

from gasoil.services.fleet_store import FleetSnapshot

# Colonnes par export / Columns per export
EXPORT_FIELDS: dict[str, list[str]] = {
    "vehicles": ["plate", "company", "driver", "type", "max_conso"],
    "trips": ["date", "plate", "consumption", "fuel", "status"],
}

UNKNOWN_PLATE = "Unknown"


class ExportService:
    """Export de données vers CSV/XLSX / Data export to CSV/XLSX."""

    @staticmethod
    def vehicle_rows(snapshot: FleetSnapshot) -> list[dict]:
        return [
            {f: getattr(v, f, None) for f in EXPORT_FIELDS["vehicles"]}
            for v in snapshot.vehicles
        ]

    @staticmethod
    def trip_rows(snapshot: FleetSnapshot) -> list[dict]:
        """Lignes trajets avec matricule résolu / Trip rows with the plate resolved."""
        catalog = snapshot.catalog
        rows = []
        for t in snapshot.trips:
            vehicle = catalog.get(t.vehicle_id)
            rows.append({
                "date": t.date,
                "plate": vehicle.plate if vehicle is not None else UNKNOWN_PLATE,
                "consumption": t.consumption,
                "fuel": t.fuel,
                "status": t.status,
            })
        return rows

    @staticmethod
    def to_csv(rows: list[dict], fields: list[str]) -> bytes:
        """Générer un CSV UTF-8 BOM / Generate a UTF-8 BOM CSV."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=fields, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({f: "" if row.get(f) is None else row.get(f) for f in fields})
        return ("\ufeff" + output.getvalue()).encode("utf-8")

    @staticmethod
    def to_xlsx(rows: list[dict], fields: list[str], sheet_name: str = "Data") -> bytes:
        """Générer un fichier Excel / Generate an Excel file."""
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_name

        # En-têtes / Headers
        for col_idx, name in enumerate(fields, 1):
            cell = ws.cell(row=1, column=col_idx, value=name)
            cell.font = Font(bold=True)

        # Données / Data rows
        for row_idx, row in enumerate(rows, 2):
            for col_idx, name in enumerate(fields, 1):
                ws.cell(row=row_idx, column=col_idx, value=row.get(name))

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()
