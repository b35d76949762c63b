# suratkeluar/schemas.py
"""
Skema Pydantic untuk request/response API.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime

from suratkeluar.constants import MAX_NOMOR_URUT, MAX_SUFFIX_LENGTH


class JenisSuratCreate(BaseModel):
    kode: str = Field(min_length=1, max_length=20)
    nama_jenis: str = Field(min_length=1, max_length=100)


class JenisSuratUpdate(BaseModel):
    nama_jenis: str = Field(min_length=1, max_length=100)


class JenisSuratRead(BaseModel):
    kode: str
    nama_jenis: str

    class Config:
        from_attributes = True


class SuratCreate(BaseModel):
    """Payload form surat. kode_bulan, tahun & nomor_lengkap diturunkan dari tanggal_surat."""
    # strict: true/"7" ditolak, bukan dikonversi diam-diam
    nomor_urut: int = Field(strict=True, le=MAX_NOMOR_URUT, description="Nomor urut per tahun (bilangan positif)")
    suffix: Optional[str] = Field(default="", max_length=MAX_SUFFIX_LENGTH, description="Huruf pembeda, mis. 'A'")
    jenis_surat: str = Field(description="Kode jenis surat")
    # divalidasi di service (parse_iso_date) supaya tanggal tidak valid -> 400
    tanggal_surat: str = Field(description="Tanggal surat, format YYYY-MM-DD")
    perihal: str = Field(min_length=1, max_length=255)
    tujuan: str = Field(min_length=1, max_length=255)
    keterangan: Optional[str] = None


class SuratRead(BaseModel):
    id: int
    nomor_urut: int
    suffix: str = ""
    jenis_surat: str
    nama_jenis: Optional[str] = None
    kode_bulan: str
    tahun: int
    tanggal_surat: date
    nomor_lengkap: str
    perihal: str
    tujuan: str
    keterangan: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SuratPage(BaseModel):
    data: List[SuratRead]
    count: int
    total_pages: int
    current_page: int
    pages: List[int] = Field(default_factory=list, description="Nomor halaman untuk navigasi")


class SuratFilter(BaseModel):
    tahun: Optional[int] = None
    bulan: Optional[str] = None
    jenis: Optional[str] = None
    search: Optional[str] = None
    tanggal_mulai: Optional[date] = None
    tanggal_selesai: Optional[date] = None


class NomorCheck(BaseModel):
    exists: bool


class NomorSaran(BaseModel):
    tahun: int
    next_nomor: int
    gaps: List[int]
    pesan: str


class NomorPreview(BaseModel):
    nomor_lengkap: str
    kode_bulan: str
    nama_bulan: str
    tahun: int


class TujuanItem(BaseModel):
    tujuan: str
    frequency: int
    last_used: Optional[datetime] = None
    last_used_label: str = "-"


class JenisCount(BaseModel):
    kode: str
    nama: str
    count: int


class DashboardStats(BaseModel):
    tahun: int
    total_surat: int
    surat_bulan_ini: int
    gap_count: int
    surat_per_jenis: List[JenisCount]


class ChartData(BaseModel):
    labels: List[str]
    values: List[int]


class BulanOption(BaseModel):
    kode: str
    nama: str


class FilterOptions(BaseModel):
    tahun: List[int]
    bulan: List[BulanOption]
