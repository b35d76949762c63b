# suratkeluar/routers/tujuan.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from suratkeluar.dependencies import get_db
from suratkeluar.routers.auth import get_current_user
from suratkeluar.schemas import TujuanItem
from suratkeluar.services.tujuan import recent_tujuan, search_tujuan

router = APIRouter(prefix="/tujuan", tags=["Tujuan"], dependencies=[Depends(get_current_user)])


@router.get("/search", response_model=List[TujuanItem], summary="Autocomplete tujuan surat")
def search(
    q: str = Query("", description="Kata kunci (minimal 2 karakter)"),
    limit: Optional[int] = Query(None, ge=1, le=50),
    db: Session = Depends(get_db),
):
    return search_tujuan(db, q, limit=limit)


@router.get("/recent", response_model=List[TujuanItem], summary="Tujuan surat terakhir dipakai")
def recent(
    limit: Optional[int] = Query(None, ge=1, le=50),
    db: Session = Depends(get_db),
):
    return recent_tujuan(db, limit=limit)
