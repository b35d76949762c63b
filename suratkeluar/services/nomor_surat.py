# suratkeluar/services/nomor_surat.py
"""
Pembentuk nomor surat keluar.

Format: {nomor_urut 3 digit}{suffix}/{kode_instansi}/{kode_jenis}/{bulan_romawi}/{tahun}
Contoh: 007/071073/LPM/001/III/2025

Fungsi murni: tanpa I/O, tanpa state. Semua kegagalan validasi dilempar sebagai
subclass NomorSuratError supaya pemanggil bisa menangkapnya sekaligus.
"""

from datetime import date, datetime
from typing import Optional, Union

from suratkeluar.constants import BULAN_INDONESIA, BULAN_ROMAWI, NOMOR_PAD_WIDTH

DateLike = Union[str, date]

_ROMAWI_KE_BULAN = {roman: month for month, roman in BULAN_ROMAWI.items()}


class NomorSuratError(ValueError):
    """Base error for letter-number validation failures."""


class InvalidSequenceError(NomorSuratError):
    pass


class InvalidDateError(NomorSuratError):
    pass


class UnknownMonthError(NomorSuratError):
    pass


def pad_number(num: int, size: int = NOMOR_PAD_WIDTH) -> str:
    # zfill tidak memotong angka yang lebih lebar dari size
    return str(num).zfill(size)


def month_to_roman(month: int) -> str:
    if isinstance(month, bool) or not isinstance(month, int) or month not in BULAN_ROMAWI:
        raise UnknownMonthError(f"Bulan tidak valid: {month!r} (harus 1-12)")
    return BULAN_ROMAWI[month]


def roman_to_month(roman: str) -> int:
    key = roman.strip().upper() if isinstance(roman, str) else roman
    if key not in _ROMAWI_KE_BULAN:
        raise UnknownMonthError(f"Kode bulan romawi tidak dikenal: {roman!r}")
    return _ROMAWI_KE_BULAN[key]


def roman_to_month_name(roman: str) -> str:
    """Map a roman month code (I-XII) to its Indonesian month name."""
    return BULAN_INDONESIA[BULAN_ROMAWI[roman_to_month(roman)]]


def parse_iso_date(value: DateLike) -> date:
    """Parse `YYYY-MM-DD` (or pass through a date) into a calendar date.

    Raises InvalidDateError for anything that is not a real calendar date,
    e.g. "not-a-date" or "2025-02-30".
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Tanggal tidak valid: {value!r}")
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    # Timestamp penuh (mis. 2025-03-15T08:00:00) juga diterima
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidDateError(f"Tanggal tidak valid: {value!r}") from None


def roman_from_date(value: DateLike) -> str:
    return month_to_roman(parse_iso_date(value).month)


def year_from_date(value: DateLike) -> int:
    return parse_iso_date(value).year


def validate_sequence(sequence) -> int:
    if isinstance(sequence, bool) or not isinstance(sequence, int) or sequence < 1:
        raise InvalidSequenceError(f"Nomor urut harus bilangan bulat positif: {sequence!r}")
    return sequence


def format_identifier(
    sequence: int,
    suffix: Optional[str],
    type_code: str,
    iso_date: DateLike,
    institution_code: str,
) -> str:
    """Build the full letter number.

    >>> format_identifier(7, "", "001", "2025-03-15", "071073/LPM")
    '007/071073/LPM/001/III/2025'
    >>> format_identifier(123, "B", "002", "2025-12-01", "071073/LPM")
    '123B/071073/LPM/002/XII/2025'
    """
    validate_sequence(sequence)
    tanggal = parse_iso_date(iso_date)
    bulan = month_to_roman(tanggal.month)
    return (
        f"{pad_number(sequence)}{suffix or ''}/{institution_code}/"
        f"{type_code}/{bulan}/{tanggal.year:04d}"
    )
