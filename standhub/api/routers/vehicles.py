# standhub/api/routers/vehicles.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from standhub.data.database import get_db
from standhub.domain.schemas import VehicleCreate, VehicleOut, VehicleImageOut, ImagePositionIn
from standhub.services.catalog_service import CatalogService

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def get_service(db: Session):
    return CatalogService(db)


@router.post("", response_model=VehicleOut, status_code=201)
def create_vehicle(payload: VehicleCreate, db: Session = Depends(get_db)):
    fields = payload.model_dump(exclude_none=True)
    try:
        return get_service(db).create_vehicle(fields.pop("stand_id"), **fields)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{vehicle_id}", status_code=204)
def delete_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_vehicle(vehicle_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{vehicle_id}/restore", response_model=VehicleOut)
def restore_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).restore_vehicle(vehicle_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/images/{image_id}/primary", response_model=VehicleImageOut)
def set_primary_image(image_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).set_as_primary(image_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/images/{image_id}/position", response_model=List[VehicleImageOut])
def move_image(image_id: int, payload: ImagePositionIn, db: Session = Depends(get_db)):
    """Zwraca wszystkie zdjecia pojazdu w nowej kolejnosci."""
    try:
        return get_service(db).move_to_position(image_id, payload.position)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
