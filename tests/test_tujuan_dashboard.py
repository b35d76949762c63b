from datetime import date, datetime

from suratkeluar.services.dashboard import chart_per_bulan, chart_per_jenis, dashboard_stats, filter_options
from suratkeluar.services.tujuan import recent_tujuan, search_tujuan

NOW = datetime(2025, 6, 20, 12, 0, 0)


def _seed_tujuan(db, make_surat):
    rows = [
        (1, "Dekan FKIP", datetime(2025, 6, 1, 8, 0)),
        (2, "Dekan FKIP", datetime(2025, 6, 18, 8, 0)),
        (3, "Dekan Fakultas Teknik", datetime(2025, 6, 20, 11, 0)),
        (4, "Rektor", datetime(2025, 6, 19, 8, 0)),
    ]
    for nomor, tujuan, created in rows:
        surat = make_surat(nomor, tujuan=tujuan)
        surat.created_at = created
    db.commit()


def test_search_tujuan_groups_and_ranks_by_frequency(db, make_surat):
    _seed_tujuan(db, make_surat)
    result = search_tujuan(db, "dekan", now=NOW)
    assert [r["tujuan"] for r in result] == ["Dekan FKIP", "Dekan Fakultas Teknik"]
    assert result[0]["frequency"] == 2
    assert result[0]["last_used"] == datetime(2025, 6, 18, 8, 0)
    assert result[0]["last_used_label"] == "2 hari lalu"
    assert result[1]["last_used_label"] == "1 jam lalu"


def test_search_tujuan_min_chars_and_limit(db, make_surat):
    _seed_tujuan(db, make_surat)
    assert search_tujuan(db, "d") == []
    assert search_tujuan(db, "   ") == []
    assert len(search_tujuan(db, "dekan", limit=1)) == 1


def test_recent_tujuan_ordered_by_last_use(db, make_surat):
    _seed_tujuan(db, make_surat)
    result = recent_tujuan(db, limit=2, now=NOW)
    assert [r["tujuan"] for r in result] == ["Dekan Fakultas Teknik", "Rektor"]


def test_dashboard_stats(db, make_surat):
    make_surat(1, tanggal="2025-03-01")
    make_surat(2, tanggal="2025-03-20", jenis_surat="002")
    make_surat(3, tanggal="2025-03-21", jenis_surat="002")
    make_surat(6, tanggal="2025-01-05")
    make_surat(1, tanggal="2024-03-01")

    stats = dashboard_stats(db, 2025, today=date(2025, 3, 25))
    assert stats["total_surat"] == 4
    assert stats["surat_bulan_ini"] == 3
    assert stats["gap_count"] == 2
    assert stats["surat_per_jenis"] == [
        {"kode": "001", "nama": "Surat Tugas", "count": 2},
        {"kode": "002", "nama": "Surat Undangan", "count": 2},
    ]


def test_dashboard_stats_empty_year(db, jenis):
    stats = dashboard_stats(db, 2030, today=date(2030, 1, 1))
    assert stats["total_surat"] == 0
    assert stats["gap_count"] == 0
    assert stats["surat_per_jenis"] == []


def test_charts(db, make_surat):
    make_surat(1, tanggal="2025-01-05")
    make_surat(2, tanggal="2025-01-25", jenis_surat="002")
    make_surat(3, tanggal="2025-12-31")
    make_surat(1, tanggal="2024-06-01", jenis_surat="002")

    per_bulan = chart_per_bulan(db, 2025)
    assert per_bulan["labels"][0] == "Jan" and per_bulan["labels"][11] == "Des"
    assert per_bulan["values"] == [2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]

    assert chart_per_jenis(db) == {"labels": ["001", "002"], "values": [2, 2]}
    assert chart_per_jenis(db, 2025) == {"labels": ["001", "002"], "values": [2, 1]}


def test_filter_options():
    options = filter_options(date(2025, 6, 1))
    assert options["tahun"] == [2025, 2024, 2023, 2022, 2021]
    assert options["bulan"][0] == {"kode": "I", "nama": "Januari"}
    assert len(options["bulan"]) == 12


def test_search_tujuan_wildcards_match_literally(db, make_surat):
    _seed_tujuan(db, make_surat)
    assert search_tujuan(db, "__") == []
    assert search_tujuan(db, "%%") == []
    make_surat(5, tujuan="Kaprodi_TI")
    assert [r["tujuan"] for r in search_tujuan(db, "i_t")] == ["Kaprodi_TI"]
