# suratkeluar/routers/jenis_surat.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from suratkeluar.dependencies import get_db
from suratkeluar.models import JenisSurat, SuratKeluar, User
from suratkeluar.routers.auth import get_current_user, require_admin
from suratkeluar.schemas import JenisSuratCreate, JenisSuratRead, JenisSuratUpdate

log = logging.getLogger(__name__)
router = APIRouter(prefix="/jenis-surat", tags=["Jenis Surat"])


@router.get("", response_model=List[JenisSuratRead])
def list_jenis_surat(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return db.query(JenisSurat).order_by(JenisSurat.nama_jenis.asc()).all()


@router.post("", response_model=JenisSuratRead, status_code=201)
def create_jenis_surat(
    payload: JenisSuratCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    kode = payload.kode.strip()
    if db.query(JenisSurat).filter(JenisSurat.kode == kode).first():
        raise HTTPException(status_code=409, detail=f"Kode jenis surat '{kode}' sudah ada")

    jenis = JenisSurat(kode=kode, nama_jenis=payload.nama_jenis.strip())
    db.add(jenis)
    db.commit()
    db.refresh(jenis)
    log.info("Jenis surat dibuat: %s - %s", jenis.kode, jenis.nama_jenis)
    return jenis


@router.put("/{kode}", response_model=JenisSuratRead)
def update_jenis_surat(
    kode: str,
    payload: JenisSuratUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    jenis = db.query(JenisSurat).filter(JenisSurat.kode == kode).first()
    if not jenis:
        raise HTTPException(status_code=404, detail="Jenis surat tidak ditemukan")

    jenis.nama_jenis = payload.nama_jenis.strip()
    db.commit()
    db.refresh(jenis)
    return jenis


@router.delete("/{kode}", status_code=204)
def delete_jenis_surat(
    kode: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    jenis = db.query(JenisSurat).filter(JenisSurat.kode == kode).first()
    if not jenis:
        raise HTTPException(status_code=404, detail="Jenis surat tidak ditemukan")

    used = db.query(SuratKeluar).filter(SuratKeluar.jenis_surat == kode).count()
    if used:
        raise HTTPException(
            status_code=409,
            detail=f"Jenis surat masih dipakai oleh {used} surat",
        )

    db.delete(jenis)
    db.commit()
    log.info("Jenis surat dihapus: %s", kode)
    return None
