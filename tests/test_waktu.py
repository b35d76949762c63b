from datetime import date, datetime, timedelta

from suratkeluar.utils.waktu import format_tanggal, format_time_ago, pagination_window, year_options

NOW = datetime(2025, 6, 20, 12, 0, 0)


def test_format_time_ago():
    assert format_time_ago(None) == "-"
    assert format_time_ago(NOW - timedelta(seconds=30), now=NOW) == "Baru saja"
    assert format_time_ago(NOW - timedelta(minutes=5), now=NOW) == "5 menit lalu"
    assert format_time_ago(NOW - timedelta(hours=3), now=NOW) == "3 jam lalu"
    assert format_time_ago(NOW - timedelta(days=2), now=NOW) == "2 hari lalu"
    assert format_time_ago(NOW - timedelta(days=15), now=NOW) == "2 minggu lalu"
    assert format_time_ago(datetime(2024, 12, 5, 9, 0), now=NOW) == "5 Des 2024"


def test_format_tanggal():
    assert format_tanggal(date(2025, 3, 5)) == "05/03/2025"
    assert format_tanggal(None) == "-"


def test_year_options_last_five_years_newest_first():
    assert year_options(date(2025, 1, 1)) == [2025, 2024, 2023, 2022, 2021]


def test_pagination_window():
    assert pagination_window(1, 1) == []
    assert pagination_window(1, 3) == [1, 2, 3]
    assert pagination_window(1, 10) == [1, 2, 3, 4, 5]
    assert pagination_window(6, 10) == [4, 5, 6, 7, 8]
    assert pagination_window(10, 10) == [6, 7, 8, 9, 10]
