# suratkeluar/services/dashboard.py
"""Statistik dashboard & data mentah untuk grafik (rendering di sisi frontend)."""

from datetime import date
from typing import Dict, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from suratkeluar.constants import BULAN_INDONESIA, BULAN_ROMAWI, BULAN_SINGKAT
from suratkeluar.models import JenisSurat, SuratKeluar
from suratkeluar.services.nomor_surat import month_to_roman
from suratkeluar.services.surat import gap_nomor
from suratkeluar.utils.waktu import year_options


def dashboard_stats(db: Session, tahun: int, today: Optional[date] = None) -> Dict:
    today = today or date.today()
    base = db.query(SuratKeluar).filter(SuratKeluar.tahun == tahun)

    total_surat = base.count()
    surat_bulan_ini = base.filter(SuratKeluar.kode_bulan == month_to_roman(today.month)).count()

    rows = (
        db.query(SuratKeluar.jenis_surat, JenisSurat.nama_jenis, func.count(SuratKeluar.id))
        .outerjoin(JenisSurat, JenisSurat.kode == SuratKeluar.jenis_surat)
        .filter(SuratKeluar.tahun == tahun)
        .group_by(SuratKeluar.jenis_surat, JenisSurat.nama_jenis)
        .all()
    )
    per_jenis = [
        {"kode": kode, "nama": nama or kode, "count": count}
        for kode, nama, count in rows
    ]
    per_jenis.sort(key=lambda item: (-item["count"], item["kode"]))

    return {
        "tahun": tahun,
        "total_surat": total_surat,
        "surat_bulan_ini": surat_bulan_ini,
        "gap_count": len(gap_nomor(db, tahun)),
        "surat_per_jenis": per_jenis,
    }


def chart_per_bulan(db: Session, tahun: int) -> Dict:
    counts = [0] * 12
    rows = (
        db.query(SuratKeluar.tanggal_surat)
        .filter(SuratKeluar.tanggal_surat >= date(tahun, 1, 1))
        .filter(SuratKeluar.tanggal_surat <= date(tahun, 12, 31))
        .all()
    )
    for (tanggal,) in rows:
        counts[tanggal.month - 1] += 1
    return {"labels": list(BULAN_SINGKAT), "values": counts}


def chart_per_jenis(db: Session, tahun: Optional[int] = None) -> Dict:
    query = db.query(SuratKeluar.jenis_surat, func.count(SuratKeluar.id))
    if tahun:
        query = query.filter(SuratKeluar.tahun == tahun)
    rows = query.group_by(SuratKeluar.jenis_surat).order_by(SuratKeluar.jenis_surat).all()
    return {
        "labels": [kode for kode, _ in rows],
        "values": [count for _, count in rows],
    }


def filter_options(today: Optional[date] = None) -> Dict:
    return {
        "tahun": year_options(today),
        "bulan": [
            {"kode": roman, "nama": BULAN_INDONESIA[roman]}
            for roman in BULAN_ROMAWI.values()
        ],
    }
