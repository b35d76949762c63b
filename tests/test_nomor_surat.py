from datetime import date

import pytest

from suratkeluar.constants import BULAN_ROMAWI
from suratkeluar.services.nomor_surat import (
    InvalidDateError,
    InvalidSequenceError,
    NomorSuratError,
    UnknownMonthError,
    format_identifier,
    month_to_roman,
    pad_number,
    parse_iso_date,
    roman_to_month,
    roman_to_month_name,
)

KODE = "071073/LPM"


def test_format_identifier_examples():
    assert format_identifier(7, "", "001", "2025-03-15", KODE) == "007/071073/LPM/001/III/2025"
    assert format_identifier(123, "B", "002", "2025-12-01", KODE) == "123B/071073/LPM/002/XII/2025"


def test_format_identifier_accepts_date_and_none_suffix():
    assert format_identifier(45, None, "SK", date(2024, 8, 17), KODE) == "045/071073/LPM/SK/VIII/2024"


@pytest.mark.parametrize("sequence, expected", [(1, "001"), (9, "009"), (10, "010"), (99, "099"), (999, "999")])
def test_sequence_padded_to_three_digits(sequence, expected):
    result = format_identifier(sequence, "", "001", "2025-01-02", KODE)
    assert result.split("/")[0] == expected


def test_sequence_above_999_not_truncated():
    assert format_identifier(1000, "", "001", "2025-01-02", KODE).startswith("1000/")
    assert format_identifier(12345, "A", "001", "2025-01-02", KODE).startswith("12345A/")


@pytest.mark.parametrize("sequence", [0, -1, 1.5, "7", True, None])
def test_invalid_sequence(sequence):
    with pytest.raises(InvalidSequenceError):
        format_identifier(sequence, "", "X", "2024-01-01", "CODE")


@pytest.mark.parametrize("value", ["not-a-date", "2025-02-30", "2025-13-01", "", None])
def test_invalid_date(value):
    with pytest.raises(InvalidDateError):
        format_identifier(5, "A", "SK", value, "CODE")


def test_errors_share_base_class():
    assert issubclass(InvalidDateError, NomorSuratError)
    assert issubclass(UnknownMonthError, ValueError)


def test_format_identifier_is_deterministic():
    args = (17, "C", "003", "2023-06-30", KODE)
    assert format_identifier(*args) == format_identifier(*args)


def test_month_roman_round_trip():
    expected = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII"]
    assert [month_to_roman(m) for m in range(1, 13)] == expected
    for month in range(1, 13):
        assert roman_to_month(month_to_roman(month)) == month


@pytest.mark.parametrize("month", [0, 13, -3, True])
def test_month_to_roman_out_of_range(month):
    with pytest.raises(UnknownMonthError):
        month_to_roman(month)


def test_roman_to_month_name():
    assert roman_to_month_name("III") == "Maret"
    assert roman_to_month_name("xii") == "Desember"
    assert [roman_to_month_name(r) for r in BULAN_ROMAWI.values()][4] == "Mei"
    with pytest.raises(UnknownMonthError):
        roman_to_month_name("XIII")


def test_parse_iso_date_accepts_timestamp():
    assert parse_iso_date("2025-03-15T08:30:00") == date(2025, 3, 15)


def test_pad_number():
    assert pad_number(5) == "005"
    assert pad_number(5, size=5) == "00005"
