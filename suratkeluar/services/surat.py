# suratkeluar/services/surat.py
"""
Operasi register surat keluar: daftar/filter, CRUD, cek duplikasi nomor,
saran nomor berikutnya & deteksi gap (nomor yang terlewat) per tahun.

Keunikan (nomor_urut, suffix, tahun) dijaga dua lapis: cek eksplisit sebelum
simpan (pesan yang jelas untuk user) dan UniqueConstraint di tabel (balapan
antar-request).
"""

import logging
import math
from typing import Dict, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from suratkeluar.config import settings
from suratkeluar.constants import MAX_NOMOR_URUT, PAGINATION_MAX_BUTTONS, SARAN_MAX_GAPS
from suratkeluar.models import JenisSurat, SuratKeluar
from suratkeluar.schemas import SuratCreate, SuratFilter
from suratkeluar.services.nomor_surat import (
    format_identifier,
    month_to_roman,
    parse_iso_date,
    roman_to_month_name,
    validate_sequence,
)
from suratkeluar.utils.waktu import format_tanggal, pagination_window

log = logging.getLogger(__name__)


class SuratError(Exception):
    """Base error for letter-register operations."""


class SuratNotFoundError(SuratError):
    def __init__(self, surat_id: int):
        super().__init__(f"Surat #{surat_id} tidak ditemukan")
        self.surat_id = surat_id


class JenisSuratNotFoundError(SuratError):
    def __init__(self, kode: str):
        super().__init__(f"Jenis surat '{kode}' tidak dikenal")
        self.kode = kode


class NomorDuplikatError(SuratError):
    def __init__(self, nomor_urut: int, suffix: str, tahun: int):
        super().__init__("Nomor surat sudah digunakan!")
        self.nomor_urut = nomor_urut
        self.suffix = suffix
        self.tahun = tahun


def _normalize_suffix(suffix: Optional[str]) -> str:
    return (suffix or "").strip()


def like_pattern(term: str) -> str:
    """Pola ILIKE 'mengandung term'; % dan _ dari user dicari apa adanya (pakai escape="\\")."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def apply_filters(query, filters: SuratFilter):
    if filters.tahun:
        query = query.filter(SuratKeluar.tahun == filters.tahun)
    if filters.bulan:
        query = query.filter(SuratKeluar.kode_bulan == filters.bulan.strip().upper())
    if filters.jenis:
        query = query.filter(SuratKeluar.jenis_surat == filters.jenis)
    if filters.tanggal_mulai:
        query = query.filter(SuratKeluar.tanggal_surat >= filters.tanggal_mulai)
    if filters.tanggal_selesai:
        query = query.filter(SuratKeluar.tanggal_surat <= filters.tanggal_selesai)
    search = (filters.search or "").strip()
    if search:
        pattern = like_pattern(search)
        query = query.filter(or_(
            SuratKeluar.perihal.ilike(pattern, escape="\\"),
            SuratKeluar.tujuan.ilike(pattern, escape="\\"),
        ))
    return query


def list_surat(db: Session, filters: SuratFilter, page: int = 1, limit: Optional[int] = None) -> Dict:
    limit = limit or settings.ITEMS_PER_PAGE
    page = max(1, page)

    query = apply_filters(db.query(SuratKeluar), filters)
    count = query.count()
    rows = (
        query.order_by(SuratKeluar.tanggal_surat.desc(), SuratKeluar.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    total_pages = math.ceil(count / limit) if count else 0
    return {
        "data": rows,
        "count": count,
        "total_pages": total_pages,
        "current_page": page,
        "pages": pagination_window(page, total_pages, PAGINATION_MAX_BUTTONS),
    }


def get_surat(db: Session, surat_id: int) -> SuratKeluar:
    surat = db.query(SuratKeluar).filter(SuratKeluar.id == surat_id).first()
    if not surat:
        raise SuratNotFoundError(surat_id)
    return surat


def nomor_exists(
    db: Session,
    nomor_urut: int,
    suffix: Optional[str],
    tahun: int,
    exclude_id: Optional[int] = None,
) -> bool:
    query = db.query(SuratKeluar.id).filter(
        SuratKeluar.nomor_urut == nomor_urut,
        SuratKeluar.suffix == _normalize_suffix(suffix),
        SuratKeluar.tahun == tahun,
    )
    if exclude_id:
        query = query.filter(SuratKeluar.id != exclude_id)
    return query.first() is not None


def _apply_payload(db: Session, surat: SuratKeluar, data: SuratCreate, exclude_id: Optional[int] = None) -> None:
    nomor_urut = validate_sequence(data.nomor_urut)
    suffix = _normalize_suffix(data.suffix)

    if not db.query(JenisSurat).filter(JenisSurat.kode == data.jenis_surat).first():
        raise JenisSuratNotFoundError(data.jenis_surat)

    tanggal = parse_iso_date(data.tanggal_surat)
    if nomor_exists(db, nomor_urut, suffix, tanggal.year, exclude_id=exclude_id):
        log.warning("Nomor %s%s/%s sudah dipakai", nomor_urut, suffix, tanggal.year)
        raise NomorDuplikatError(nomor_urut, suffix, tanggal.year)

    surat.nomor_urut = nomor_urut
    surat.suffix = suffix
    surat.jenis_surat = data.jenis_surat
    surat.tanggal_surat = tanggal
    surat.kode_bulan = month_to_roman(tanggal.month)
    surat.tahun = tanggal.year
    surat.nomor_lengkap = format_identifier(nomor_urut, suffix, data.jenis_surat, tanggal, settings.KODE_INSTANSI)
    surat.perihal = data.perihal.strip()
    surat.tujuan = data.tujuan.strip()
    surat.keterangan = (data.keterangan or "").strip() or None


def _commit(db: Session, surat: SuratKeluar) -> SuratKeluar:
    # Setelah rollback atribut objek ter-expire, jadi nilai nomor diambil dulu
    nomor = (surat.nomor_urut, surat.suffix, surat.tahun)
    nomor_lengkap = surat.nomor_lengkap
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        log.warning("Unique constraint nomor surat dilanggar: %s", nomor_lengkap)
        raise NomorDuplikatError(*nomor)
    db.refresh(surat)
    return surat


def create_surat(db: Session, data: SuratCreate) -> SuratKeluar:
    surat = SuratKeluar()
    _apply_payload(db, surat, data)
    db.add(surat)
    surat = _commit(db, surat)
    log.info("Surat dibuat: ID=%s nomor=%s", surat.id, surat.nomor_lengkap)
    return surat


def update_surat(db: Session, surat_id: int, data: SuratCreate) -> SuratKeluar:
    surat = get_surat(db, surat_id)
    _apply_payload(db, surat, data, exclude_id=surat_id)
    surat = _commit(db, surat)
    log.info("Surat diupdate: ID=%s nomor=%s", surat.id, surat.nomor_lengkap)
    return surat


def delete_surat(db: Session, surat_id: int) -> None:
    surat = get_surat(db, surat_id)
    nomor_lengkap = surat.nomor_lengkap
    db.delete(surat)
    db.commit()
    log.info("Surat dihapus: ID=%s nomor=%s", surat_id, nomor_lengkap)


def next_nomor_urut(db: Session, tahun: int) -> int:
    last = db.query(func.max(SuratKeluar.nomor_urut)).filter(SuratKeluar.tahun == tahun).scalar()
    return (last or 0) + 1


def gap_nomor(db: Session, tahun: int) -> List[int]:
    """Nomor urut dalam rentang 1..max tahun itu yang belum punya surat.

    Rentang dibatasi MAX_NOMOR_URUT; baris lama di atas batas tidak ikut dihitung.
    """
    used = {
        nomor
        for (nomor,) in db.query(SuratKeluar.nomor_urut)
        .filter(SuratKeluar.tahun == tahun, SuratKeluar.nomor_urut <= MAX_NOMOR_URUT)
        .distinct()
    }
    if not used:
        return []
    return [n for n in range(1, max(used)) if n not in used]


def saran_nomor(db: Session, tahun: int) -> Dict:
    next_nomor = next_nomor_urut(db, tahun)
    gaps = gap_nomor(db, tahun)
    pesan = f"Saran nomor berikutnya: {next_nomor}"
    if gaps:
        shown = ", ".join(str(n) for n in gaps[:SARAN_MAX_GAPS])
        more = "..." if len(gaps) > SARAN_MAX_GAPS else ""
        pesan += f" | Gap: {shown}{more}"
    return {"tahun": tahun, "next_nomor": next_nomor, "gaps": gaps, "pesan": pesan}


def preview_nomor(nomor_urut: int, suffix: Optional[str], jenis_surat: str, tanggal_surat) -> Dict:
    tanggal = parse_iso_date(tanggal_surat)
    kode_bulan = month_to_roman(tanggal.month)
    return {
        "nomor_lengkap": format_identifier(
            nomor_urut, _normalize_suffix(suffix), jenis_surat, tanggal, settings.KODE_INSTANSI
        ),
        "kode_bulan": kode_bulan,
        "nama_bulan": roman_to_month_name(kode_bulan),
        "tahun": tanggal.year,
    }


def teks_salin(surat: SuratKeluar) -> str:
    """Teks yang disalin saat nomor surat diklik."""
    return f"{surat.nomor_lengkap}\nTanggal: {format_tanggal(surat.tanggal_surat)}"
