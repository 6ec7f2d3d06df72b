# standhub/api/routers/audit.py
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from standhub.api.dependencies import check_window
from standhub.data.database import get_db
from standhub.domain.schemas import ActiveUserOut, LabelCountOut, DailyCountOut, BucketCountOut
from standhub.services.audit_service import AuditService
from standhub.utils.settings import DEFAULT_REPORT_LIMIT, DEFAULT_TREND_DAYS

router = APIRouter(prefix="/audit", tags=["audit"])


def get_service(db: Session):
    return AuditService(db)


@router.get("/most-active-users", response_model=List[ActiveUserOut])
def most_active_users(
    limit: int = Query(DEFAULT_REPORT_LIMIT, gt=0, le=100),
    start: date | None = None,
    end: date | None = None,
    db: Session = Depends(get_db),
):
    check_window(start, end)
    return get_service(db).most_active_users(limit, start, end)


@router.get("/actions", response_model=List[LabelCountOut])
def most_common_actions(
    limit: int = Query(DEFAULT_REPORT_LIMIT, gt=0, le=100),
    start: date | None = None,
    end: date | None = None,
    db: Session = Depends(get_db),
):
    check_window(start, end)
    return get_service(db).most_common_actions(limit, start, end)


@router.get("/tables", response_model=List[LabelCountOut])
def most_affected_tables(
    limit: int = Query(DEFAULT_REPORT_LIMIT, gt=0, le=100),
    start: date | None = None,
    end: date | None = None,
    db: Session = Depends(get_db),
):
    check_window(start, end)
    return get_service(db).most_affected_tables(limit, start, end)


@router.get("/trend", response_model=List[DailyCountOut])
def activity_trend(days: int = Query(DEFAULT_TREND_DAYS, gt=0, le=365), db: Session = Depends(get_db)):
    return get_service(db).activity_trend(days)


@router.get("/by-hour", response_model=List[BucketCountOut])
def actions_by_hour(start: date | None = None, end: date | None = None, db: Session = Depends(get_db)):
    check_window(start, end)
    return get_service(db).actions_by_hour(start, end)


@router.get("/by-weekday", response_model=List[BucketCountOut])
def actions_by_day_of_week(start: date | None = None, end: date | None = None, db: Session = Depends(get_db)):
    check_window(start, end)
    return get_service(db).actions_by_day_of_week(start, end)
