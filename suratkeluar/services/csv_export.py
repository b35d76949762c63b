# suratkeluar/services/csv_export.py
"""
Ekspor CSV surat keluar.

Format: UTF-8 tanpa BOM, dipisah koma, header dari key baris pertama. Field
hanya dikutip jika berupa string yang mengandung koma (kutip di dalamnya
digandakan). Setiap baris diakhiri '\\n'.
"""

from datetime import date
from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from suratkeluar.constants import CSV_FILENAME_PREFIX, CSV_HEADERS
from suratkeluar.models import SuratKeluar
from suratkeluar.schemas import SuratFilter
from suratkeluar.services.surat import apply_filters


class EmptyExportError(ValueError):
    def __init__(self):
        super().__init__("Tidak ada data untuk di-export")


def _csv_field(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        if "," in value:
            return '"' + value.replace('"', '""') + '"'
        return value
    return str(value)


def to_csv(rows: Sequence[Dict]) -> str:
    if not rows:
        raise EmptyExportError()

    headers = list(rows[0].keys())
    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(_csv_field(row.get(header)) for header in headers))
    return "\n".join(lines) + "\n"


def export_rows(db: Session, filters: Optional[SuratFilter] = None) -> List[Dict]:
    # Ekspor hanya memakai filter tahun/bulan/jenis, bukan pencarian teks
    filters = filters or SuratFilter()
    scoped = SuratFilter(tahun=filters.tahun, bulan=filters.bulan, jenis=filters.jenis)
    query = apply_filters(db.query(SuratKeluar), scoped)
    rows = query.order_by(SuratKeluar.tanggal_surat.desc(), SuratKeluar.id.desc()).all()
    return [
        dict(zip(CSV_HEADERS, (
            surat.nomor_lengkap,
            surat.tanggal_surat.isoformat(),
            surat.nama_jenis or "",
            surat.perihal,
            surat.tujuan,
            surat.keterangan or "",
        )))
        for surat in rows
    ]


def export_filename(today: Optional[date] = None) -> str:
    return f"{CSV_FILENAME_PREFIX}-{(today or date.today()).isoformat()}.csv"
