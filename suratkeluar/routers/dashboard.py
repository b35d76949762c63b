# suratkeluar/routers/dashboard.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from suratkeluar.dependencies import get_db
from suratkeluar.routers.auth import get_current_user
from suratkeluar.schemas import ChartData, DashboardStats, FilterOptions
from suratkeluar.services import dashboard as dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"], dependencies=[Depends(get_current_user)])


@router.get("/stats", response_model=DashboardStats)
def stats(tahun: Optional[int] = Query(None, ge=1000, le=9999), db: Session = Depends(get_db)):
    today = date.today()
    return dashboard_service.dashboard_stats(db, tahun or today.year, today=today)


@router.get("/chart/per-bulan", response_model=ChartData)
def chart_per_bulan(tahun: Optional[int] = Query(None, ge=1000, le=9999), db: Session = Depends(get_db)):
    return dashboard_service.chart_per_bulan(db, tahun or date.today().year)


@router.get("/chart/per-jenis", response_model=ChartData)
def chart_per_jenis(tahun: Optional[int] = Query(None, ge=1000, le=9999), db: Session = Depends(get_db)):
    return dashboard_service.chart_per_jenis(db, tahun)


@router.get("/filter-options", response_model=FilterOptions)
def filter_options():
    return dashboard_service.filter_options()
