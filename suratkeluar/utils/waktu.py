# suratkeluar/utils/waktu.py
"""Helper tampilan tanggal/waktu berbahasa Indonesia."""

from datetime import date, datetime
from typing import List, Optional

from suratkeluar.constants import BULAN_SINGKAT


def format_tanggal(value: Optional[date]) -> str:
    """Format tanggal sebagai DD/MM/YYYY, '-' jika kosong."""
    if not value:
        return "-"
    return value.strftime("%d/%m/%Y")


def format_time_ago(timestamp: Optional[datetime], now: Optional[datetime] = None) -> str:
    if not timestamp:
        return "-"

    now = now or datetime.utcnow()
    diff_seconds = (now - timestamp).total_seconds()
    diff_mins = int(diff_seconds // 60)
    diff_hours = int(diff_seconds // 3600)
    diff_days = int(diff_seconds // 86400)

    if diff_mins < 1:
        return "Baru saja"
    if diff_mins < 60:
        return f"{diff_mins} menit lalu"
    if diff_hours < 24:
        return f"{diff_hours} jam lalu"
    if diff_days < 7:
        return f"{diff_days} hari lalu"
    if diff_days < 30:
        return f"{diff_days // 7} minggu lalu"

    return f"{timestamp.day} {BULAN_SINGKAT[timestamp.month - 1]} {timestamp.year}"


def year_options(today: Optional[date] = None, count: int = 5) -> List[int]:
    """Tahun untuk filter: `count` tahun terakhir, terbaru dulu."""
    current = (today or date.today()).year
    return list(range(current, current - count, -1))


def pagination_window(current: int, total: int, max_buttons: int = 5) -> List[int]:
    """Nomor halaman yang ditampilkan di navigasi (maksimal `max_buttons`)."""
    if total <= 1:
        return []
    start = max(1, current - max_buttons // 2)
    end = min(total, start + max_buttons - 1)
    if end - start < max_buttons - 1:
        start = max(1, end - max_buttons + 1)
    return list(range(start, end + 1))
