# suratkeluar/routers/nomor.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from suratkeluar.dependencies import get_db
from suratkeluar.routers.auth import get_current_user
from suratkeluar.schemas import NomorCheck, NomorPreview, NomorSaran
from suratkeluar.services import surat as surat_service
from suratkeluar.services.nomor_surat import validate_sequence

router = APIRouter(prefix="/nomor", tags=["Nomor"], dependencies=[Depends(get_current_user)])


@router.get("/next", summary="Nomor urut berikutnya untuk tahun tertentu")
def next_nomor(tahun: int = Query(..., ge=1000, le=9999), db: Session = Depends(get_db)):
    return {"tahun": tahun, "next_nomor": surat_service.next_nomor_urut(db, tahun)}


@router.get("/gaps", response_model=List[int], summary="Nomor urut yang terlewat (gap)")
def gaps(tahun: int = Query(..., ge=1000, le=9999), db: Session = Depends(get_db)):
    return surat_service.gap_nomor(db, tahun)


@router.get("/saran", response_model=NomorSaran, summary="Saran nomor + daftar gap dari tanggal surat")
def saran(tanggal: Optional[date] = None, db: Session = Depends(get_db)):
    tahun = (tanggal or date.today()).year
    return surat_service.saran_nomor(db, tahun)


@router.get("/check", response_model=NomorCheck, summary="Cek apakah nomor sudah dipakai")
def check(
    nomor_urut: int,
    tahun: int,
    suffix: str = "",
    exclude_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    validate_sequence(nomor_urut)
    exists = surat_service.nomor_exists(db, nomor_urut, suffix, tahun, exclude_id=exclude_id)
    return {"exists": exists}


@router.get("/preview", response_model=NomorPreview, summary="Pratinjau nomor lengkap")
def preview(nomor_urut: int, jenis_surat: str, tanggal_surat: str, suffix: str = ""):
    # tanggal_surat sengaja string: tanggal tidak valid -> 400 InvalidDateError
    return surat_service.preview_nomor(nomor_urut, suffix, jenis_surat, tanggal_surat)
