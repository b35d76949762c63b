# suratkeluar/models.py
from datetime import datetime

from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy import (
    Column, Integer, String, Text, Date, DateTime, ForeignKey, Index, UniqueConstraint,
)

# Definisikan Base DI SINI (jangan impor dari suratkeluar.database)
Base = declarative_base()


class JenisSurat(Base):
    __tablename__ = "jenis_surat"
    kode = Column(String(20), primary_key=True)
    nama_jenis = Column(String(100), nullable=False, index=True)


class SuratKeluar(Base):
    __tablename__ = "surat_keluar"
    __table_args__ = (
        # Satu nomor (urut + suffix) hanya boleh dipakai sekali per tahun
        UniqueConstraint("nomor_urut", "suffix", "tahun", name="uq_surat_keluar_nomor"),
        Index("ix_surat_keluar_tahun_bulan", "tahun", "kode_bulan"),
        Index("ix_surat_keluar_tanggal_id", "tanggal_surat", "id"),
    )
    id = Column(Integer, primary_key=True, index=True)

    nomor_urut = Column(Integer, nullable=False)
    suffix = Column(String(5), nullable=False, default="")
    jenis_surat = Column(String(20), ForeignKey("jenis_surat.kode"), nullable=False, index=True)
    kode_bulan = Column(String(4), nullable=False)   # I .. XII
    tahun = Column(Integer, nullable=False, index=True)
    tanggal_surat = Column(Date, nullable=False)
    nomor_lengkap = Column(String(100), nullable=False, index=True)

    perihal = Column(String(255), nullable=False)
    tujuan = Column(String(255), nullable=False, index=True)
    keterangan = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    jenis = relationship("JenisSurat", lazy="joined")

    @property
    def nama_jenis(self) -> str | None:
        return self.jenis.nama_jenis if self.jenis else None


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), default="staf")  # admin | staf
    last_login = Column(DateTime, nullable=True)
