# standhub/api/routers/users.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from standhub.data.database import get_db
from standhub.domain.schemas import UserPerformanceOut
from standhub.services.performance_service import PerformanceService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/performance", response_model=UserPerformanceOut)
def user_performance(user_id: int, db: Session = Depends(get_db)):
    service = PerformanceService(db)
    try:
        return service.performance(user_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
