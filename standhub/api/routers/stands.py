# standhub/api/routers/stands.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from standhub.data.database import get_db
from standhub.domain.schemas import StandCreate, StandOut, StandOpenOut, StandTotalsOut
from standhub.services.catalog_service import CatalogService, WEEKDAYS
from standhub.services.sales_service import SalesService

router = APIRouter(prefix="/stands", tags=["stands"])


def get_service(db: Session):
    return CatalogService(db)


@router.post("", response_model=StandOut, status_code=201)
def create_stand(payload: StandCreate, db: Session = Depends(get_db)):
    fields = payload.model_dump(exclude_none=True)
    return get_service(db).create_stand(fields.pop("name"), **fields)


@router.get("/{stand_id}/open", response_model=StandOpenOut)
def is_stand_open(
    stand_id: int,
    day: str | None = Query(None, description="dzien tygodnia, np. monday"),
    at: str | None = Query(None, pattern=r"^\d{2}:\d{2}$"),
    db: Session = Depends(get_db),
):
    if day and day.lower() not in WEEKDAYS:
        raise HTTPException(status_code=400, detail="Nieznany dzien tygodnia")
    return {"stand_id": stand_id, "is_open": get_service(db).is_stand_open(stand_id, day, at)}


@router.delete("/{stand_id}", status_code=204)
def delete_stand(stand_id: int, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_stand(stand_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{stand_id}/restore", response_model=StandOut)
def restore_stand(stand_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).restore_stand(stand_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{stand_id}/sales-totals", response_model=StandTotalsOut)
def stand_totals(stand_id: int, db: Session = Depends(get_db)):
    if not get_service(db).stands.get_stand(stand_id):
        raise HTTPException(status_code=404, detail="Stoisko nie istnieje")
    return SalesService(db).stand_totals(stand_id)
