# suratkeluar/routers/export.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from suratkeluar.dependencies import get_db
from suratkeluar.routers.auth import get_current_user
from suratkeluar.schemas import SuratFilter
from suratkeluar.services.csv_export import EmptyExportError, export_filename, export_rows, to_csv

log = logging.getLogger(__name__)
router = APIRouter(prefix="/export", tags=["Export"], dependencies=[Depends(get_current_user)])


@router.get("/surat.csv", summary="Ekspor surat keluar ke CSV")
def export_surat_csv(
    tahun: Optional[int] = None,
    bulan: Optional[str] = None,
    jenis: Optional[str] = None,
    db: Session = Depends(get_db),
):
    rows = export_rows(db, SuratFilter(tahun=tahun, bulan=bulan, jenis=jenis))
    try:
        content = to_csv(rows)
    except EmptyExportError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    filename = export_filename()
    log.info("Export CSV: %d surat -> %s", len(rows), filename)
    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
