# standhub/api/routers/inquiries.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from standhub.data.database import get_db
from standhub.domain.schemas import (
    InquiryCreate,
    InquiryOut,
    InquirySummaryOut,
    InquiryStatusIn,
    InquiryAssignIn,
    InquiryNotesIn,
)
from standhub.services.inquiry_service import InquiryService

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


def get_service(db: Session):
    return InquiryService(db)


@router.post("", response_model=InquiryOut, status_code=201)
def create_inquiry(payload: InquiryCreate, db: Session = Depends(get_db)):
    fields = payload.model_dump(exclude_none=True)
    try:
        return get_service(db).create_inquiry(
            fields.pop("stand_id"), fields.pop("name"), fields.pop("email"), **fields
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/overdue", response_model=List[InquiryOut])
def overdue_inquiries(stand_id: int | None = None, db: Session = Depends(get_db)):
    return get_service(db).overdue_inquiries(stand_id)


@router.get("/{inquiry_id}", response_model=InquirySummaryOut)
def inquiry_summary(inquiry_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).summary(inquiry_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{inquiry_id}/status", response_model=InquiryOut)
def update_status(inquiry_id: int, payload: InquiryStatusIn, db: Session = Depends(get_db)):
    try:
        return get_service(db).update_status(inquiry_id, payload.status)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{inquiry_id}/assign", response_model=InquiryOut)
def assign_inquiry(inquiry_id: int, payload: InquiryAssignIn, db: Session = Depends(get_db)):
    try:
        return get_service(db).assign_to(inquiry_id, payload.user_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{inquiry_id}/assign", response_model=InquiryOut)
def unassign_inquiry(inquiry_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).unassign(inquiry_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{inquiry_id}/notes", response_model=InquiryOut)
def add_notes(inquiry_id: int, payload: InquiryNotesIn, db: Session = Depends(get_db)):
    try:
        return get_service(db).add_notes(inquiry_id, payload.notes)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
