# suratkeluar/constants.py
"""
Tabel tetap untuk penomoran surat keluar.
"""

BULAN_ROMAWI = {
    1: "I", 2: "II", 3: "III", 4: "IV", 5: "V", 6: "VI",
    7: "VII", 8: "VIII", 9: "IX", 10: "X", 11: "XI", 12: "XII",
}

BULAN_INDONESIA = {
    "I": "Januari", "II": "Februari", "III": "Maret", "IV": "April",
    "V": "Mei", "VI": "Juni", "VII": "Juli", "VIII": "Agustus",
    "IX": "September", "X": "Oktober", "XI": "November", "XII": "Desember",
}

# Label sumbu grafik per bulan
BULAN_SINGKAT = [
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
]

NOMOR_PAD_WIDTH = 3
MAX_SUFFIX_LENGTH = 5
MAX_NOMOR_URUT = 99999
PAGINATION_MAX_BUTTONS = 5
SARAN_MAX_GAPS = 5

CSV_HEADERS = ["Nomor Surat", "Tanggal", "Jenis", "Perihal", "Tujuan", "Keterangan"]
CSV_FILENAME_PREFIX = "surat-lpm"
