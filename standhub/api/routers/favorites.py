# standhub/api/routers/favorites.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from standhub.data.database import get_db
from standhub.domain.schemas import FavoriteToggleOut, FavoriteCountOut, VehicleOut
from standhub.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["favorites"])


def get_service(db: Session):
    return FavoriteService(db)


@router.post("/{vehicle_id}/toggle", response_model=FavoriteToggleOut)
def toggle_favorite(vehicle_id: int, user_id: int = Query(..., gt=0), db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        favorited = svc.toggle(user_id, vehicle_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {
        "vehicle_id": vehicle_id,
        "favorited": favorited,
        "favorites_count": svc.vehicle_favorites_count(vehicle_id),
    }


@router.get("/users/{user_id}", response_model=List[VehicleOut])
def user_favorites(user_id: int, db: Session = Depends(get_db)):
    return get_service(db).user_favorites(user_id)


@router.get("/vehicles/{vehicle_id}/count", response_model=FavoriteCountOut)
def vehicle_favorites_count(vehicle_id: int, db: Session = Depends(get_db)):
    return {"vehicle_id": vehicle_id, "favorites_count": get_service(db).vehicle_favorites_count(vehicle_id)}
