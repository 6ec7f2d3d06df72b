# standhub/api/routers/traffic.py
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from standhub.api.dependencies import check_window
from standhub.data.database import get_db
from standhub.domain.schemas import (
    RecordViewIn,
    RecordResultOut,
    MostViewedOut,
    VehicleTrafficOut,
    LabelCountOut,
)
from standhub.services.traffic_service import TrafficService
from standhub.utils.settings import DEFAULT_REPORT_LIMIT, DEFAULT_TREND_DAYS

router = APIRouter(prefix="/traffic", tags=["traffic"])


def get_service(db: Session):
    return TrafficService(db)


@router.post("/vehicles/{vehicle_id}/views", response_model=RecordResultOut, status_code=201)
def record_view(vehicle_id: int, payload: RecordViewIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    ok = svc.record_view(
        vehicle_id,
        user_id=payload.user_id,
        ip_address=payload.ip_address,
        user_agent=payload.user_agent,
    )
    if not ok:
        raise HTTPException(status_code=400, detail="Nie udalo sie zapisac wyswietlenia")
    return {"success": True}


@router.get("/most-viewed", response_model=List[MostViewedOut])
def most_viewed(
    limit: int = Query(DEFAULT_REPORT_LIMIT, gt=0, le=100),
    start: date | None = None,
    end: date | None = None,
    db: Session = Depends(get_db),
):
    check_window(start, end)
    return get_service(db).most_viewed(limit, start, end)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleTrafficOut)
def vehicle_traffic(
    vehicle_id: int,
    days: int = Query(DEFAULT_TREND_DAYS, gt=0, le=365),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).vehicle_traffic(vehicle_id, days)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/vehicles/{vehicle_id}/devices", response_model=List[LabelCountOut])
def views_by_device(vehicle_id: int, db: Session = Depends(get_db)):
    return get_service(db).views_by_device_type(vehicle_id)


@router.get("/vehicles/{vehicle_id}/browsers", response_model=List[LabelCountOut])
def views_by_browser(vehicle_id: int, db: Session = Depends(get_db)):
    return get_service(db).views_by_browser(vehicle_id)


@router.get("/vehicles/{vehicle_id}/operating-systems", response_model=List[LabelCountOut])
def views_by_operating_system(vehicle_id: int, db: Session = Depends(get_db)):
    return get_service(db).views_by_operating_system(vehicle_id)
