from datetime import date

import pytest

from suratkeluar.schemas import SuratFilter
from suratkeluar.services.csv_export import EmptyExportError, export_filename, export_rows, to_csv


def test_header_from_first_row_keys():
    rows = [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]
    assert to_csv(rows) == "a,b\n1,2\n3,4\n"


def test_only_fields_with_comma_are_quoted():
    rows = [{"Perihal": 'Undangan, "rapat"', "Tujuan": 'Ketua "LPM"'}]
    assert to_csv(rows) == 'Perihal,Tujuan\n"Undangan, ""rapat""",Ketua "LPM"\n'


def test_none_and_numbers():
    rows = [{"nomor": 7, "keterangan": None}]
    assert to_csv(rows) == "nomor,keterangan\n7,\n"


def test_empty_export_raises():
    with pytest.raises(EmptyExportError, match="Tidak ada data"):
        to_csv([])


def test_export_filename():
    assert export_filename(date(2025, 3, 15)) == "surat-lpm-2025-03-15.csv"


def test_export_rows_filtered_and_ordered(db, make_surat):
    make_surat(1, tanggal="2025-01-10", perihal="Tugas, luar kota")
    make_surat(2, tanggal="2025-03-01", jenis_surat="002", keterangan="Penting")
    make_surat(1, tanggal="2024-05-05")

    rows = export_rows(db, SuratFilter(tahun=2025))
    assert [r["Nomor Surat"] for r in rows] == [
        "002/071073/LPM/002/III/2025",
        "001/071073/LPM/001/I/2025",
    ]
    assert rows[0]["Jenis"] == "Surat Undangan"
    assert rows[0]["Keterangan"] == "Penting"
    assert rows[1]["Keterangan"] == ""

    csv_text = to_csv(rows)
    assert csv_text.splitlines()[0] == "Nomor Surat,Tanggal,Jenis,Perihal,Tujuan,Keterangan"
    assert '"Tugas, luar kota"' in csv_text


def test_export_rows_ignores_text_search(db, make_surat):
    make_surat(1, perihal="Seminar")
    rows = export_rows(db, SuratFilter(search="tidak-ada"))
    assert len(rows) == 1
