# standhub/api/routers/sales.py
from datetime import date
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from standhub.api.dependencies import check_window
from standhub.data.database import get_db
from standhub.domain.schemas import SalesSummaryOut, TopSellerOut, PaymentMethodTotalOut, SaleOut
from standhub.services.sales_service import SalesService
from standhub.tasks.commissions import recompute_commission_task
from standhub.utils.settings import DEFAULT_REPORT_LIMIT

router = APIRouter(prefix="/sales", tags=["sales"])


def get_service(db: Session):
    return SalesService(db)


@router.get("/summary", response_model=SalesSummaryOut)
def sales_summary(
    start: date | None = None,
    end: date | None = None,
    seller_id: int | None = None,
    stand_id: int | None = None,
    payment_method: str | None = None,
    db: Session = Depends(get_db),
):
    check_window(start, end)
    svc = get_service(db)
    return svc.summary(start, end, seller_id=seller_id, stand_id=stand_id, payment_method=payment_method)


@router.get("/top-sellers", response_model=List[TopSellerOut])
def top_sellers(
    start: date | None = None,
    end: date | None = None,
    limit: int = Query(DEFAULT_REPORT_LIMIT, gt=0, le=100),
    db: Session = Depends(get_db),
):
    check_window(start, end)
    return get_service(db).top_sellers(start, end, limit)


@router.get("/payment-methods", response_model=List[PaymentMethodTotalOut])
def revenue_by_payment_method(
    start: date | None = None,
    end: date | None = None,
    db: Session = Depends(get_db),
):
    check_window(start, end)
    return get_service(db).revenue_by_payment_method(start, end)


@router.get("/commission")
def calculate_commission(
    sale_price: Decimal = Query(..., ge=0),
    commission_percentage: Decimal = Query(..., ge=0, le=100),
):
    return {"commission_amount": SalesService.calculate_commission(sale_price, commission_percentage)}


@router.post("/{sale_id}/commission/recompute", response_model=SaleOut)
def recompute_commission(sale_id: int, db: Session = Depends(get_db)):
    """
    Przelicza commission_amount sprzedazy na podstawie aktualnego commission_percentage.
    """
    svc = get_service(db)
    try:
        return svc.recompute_commission(sale_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{sale_id}/commission/recompute-async", status_code=202)
def recompute_commission_async(sale_id: int):
    task = recompute_commission_task.delay(sale_id)
    return {"task_id": task.id}
