from scripts.cek_nomor import check_nomor, laporan_nomor


def test_laporan_nomor(db, make_surat):
    for nomor in (1, 2, 6):
        make_surat(nomor)
    assert laporan_nomor(db, 2025) == {"tahun": 2025, "total": 3, "next_nomor": 7, "gaps": [3, 4, 5]}


def test_check_nomor_reports_gaps(db, make_surat):
    make_surat(1)
    assert check_nomor(2025, db=db) is True
    make_surat(3)
    assert check_nomor(2025, db=db) is False
