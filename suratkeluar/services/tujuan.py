# suratkeluar/services/tujuan.py
"""Autocomplete tujuan surat: pencarian & riwayat tujuan terakhir."""

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from suratkeluar.config import settings
from suratkeluar.models import SuratKeluar
from suratkeluar.services.surat import like_pattern
from suratkeluar.utils.waktu import format_time_ago


def _to_items(rows, now: Optional[datetime]) -> List[Dict]:
    return [
        {
            "tujuan": tujuan,
            "frequency": frequency,
            "last_used": last_used,
            "last_used_label": format_time_ago(last_used, now=now),
        }
        for tujuan, frequency, last_used in rows
    ]


def _grouped(db: Session):
    last_used = func.max(SuratKeluar.created_at)
    frequency = func.count(SuratKeluar.id)
    query = db.query(SuratKeluar.tujuan, frequency, last_used).group_by(SuratKeluar.tujuan)
    return query, frequency, last_used


def search_tujuan(
    db: Session,
    term: str,
    limit: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[Dict]:
    term = (term or "").strip()
    if len(term) < settings.MIN_SEARCH_CHARS:
        return []
    limit = limit or settings.SEARCH_TUJUAN_LIMIT

    query, frequency, last_used = _grouped(db)
    rows = (
        query.filter(SuratKeluar.tujuan.ilike(like_pattern(term), escape="\\"))
        .order_by(frequency.desc(), last_used.desc(), SuratKeluar.tujuan)
        .limit(limit)
        .all()
    )
    return _to_items(rows, now)


def recent_tujuan(db: Session, limit: Optional[int] = None, now: Optional[datetime] = None) -> List[Dict]:
    limit = limit or settings.RECENT_TUJUAN_LIMIT
    query, _, last_used = _grouped(db)
    rows = query.order_by(last_used.desc(), SuratKeluar.tujuan).limit(limit).all()
    return _to_items(rows, now)
