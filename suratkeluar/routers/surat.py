# suratkeluar/routers/surat.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from suratkeluar.config import settings
from suratkeluar.dependencies import get_db
from suratkeluar.routers.auth import get_current_user
from suratkeluar.schemas import SuratCreate, SuratFilter, SuratPage, SuratRead
from suratkeluar.services import surat as surat_service
from suratkeluar.services.surat import (
    JenisSuratNotFoundError,
    NomorDuplikatError,
    SuratNotFoundError,
)

router = APIRouter(prefix="/surat", tags=["Surat"], dependencies=[Depends(get_current_user)])


def _raise_http(exc: Exception):
    if isinstance(exc, SuratNotFoundError):
        raise HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, NomorDuplikatError):
        raise HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, JenisSuratNotFoundError):
        raise HTTPException(status_code=400, detail=str(exc))
    raise exc


@router.get("", response_model=SuratPage, summary="Daftar surat keluar (filter + paginasi)")
def list_surat(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.ITEMS_PER_PAGE, ge=1, le=100),
    tahun: Optional[int] = None,
    bulan: Optional[str] = Query(None, description="Kode bulan romawi, mis. III"),
    jenis: Optional[str] = None,
    search: Optional[str] = Query(None, description="Cari di perihal/tujuan"),
    tanggal_mulai: Optional[date] = None,
    tanggal_selesai: Optional[date] = None,
    db: Session = Depends(get_db),
):
    filters = SuratFilter(
        tahun=tahun,
        bulan=bulan,
        jenis=jenis,
        search=search,
        tanggal_mulai=tanggal_mulai,
        tanggal_selesai=tanggal_selesai,
    )
    return surat_service.list_surat(db, filters, page=page, limit=limit)


@router.get("/{surat_id}", response_model=SuratRead)
def get_surat(surat_id: int, db: Session = Depends(get_db)):
    try:
        return surat_service.get_surat(db, surat_id)
    except SuratNotFoundError as exc:
        _raise_http(exc)


@router.get("/{surat_id}/salin", response_class=PlainTextResponse, summary="Teks nomor surat untuk disalin")
def salin_nomor(surat_id: int, db: Session = Depends(get_db)):
    try:
        surat = surat_service.get_surat(db, surat_id)
    except SuratNotFoundError as exc:
        _raise_http(exc)
    return surat_service.teks_salin(surat)


@router.post("", response_model=SuratRead, status_code=201)
def create_surat(payload: SuratCreate, db: Session = Depends(get_db)):
    try:
        return surat_service.create_surat(db, payload)
    except (NomorDuplikatError, JenisSuratNotFoundError) as exc:
        _raise_http(exc)


@router.put("/{surat_id}", response_model=SuratRead)
def update_surat(surat_id: int, payload: SuratCreate, db: Session = Depends(get_db)):
    try:
        return surat_service.update_surat(db, surat_id, payload)
    except (SuratNotFoundError, NomorDuplikatError, JenisSuratNotFoundError) as exc:
        _raise_http(exc)


@router.delete("/{surat_id}", status_code=204)
def delete_surat(surat_id: int, db: Session = Depends(get_db)):
    try:
        surat_service.delete_surat(db, surat_id)
    except SuratNotFoundError as exc:
        _raise_http(exc)
    return None
