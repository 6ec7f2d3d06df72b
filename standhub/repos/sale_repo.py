# standhub/repos/sale_repo.py
from datetime import date

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from standhub.data.models.sale import SaleModel
from standhub.repos.filters import date_window


def _cents(amount):
    # sqlite trzyma Numeric jako REAL, suma bez zaokraglenia psuje remisy
    return func.round(func.coalesce(amount, 0), 2)


class SaleRepo:
    def __init__(self, db: Session):
        self.db = db

    def _scoped(
        self,
        stmt,
        start: date | None = None,
        end: date | None = None,
        seller_id: int | None = None,
        stand_id: int | None = None,
        payment_method: str | None = None,
    ):
        stmt = date_window(stmt, SaleModel.sale_date, start, end)
        if seller_id is not None:
            stmt = stmt.where(SaleModel.seller_id == seller_id)
        if stand_id is not None:
            stmt = stmt.where(SaleModel.stand_id == stand_id)
        if payment_method is not None:
            stmt = stmt.where(SaleModel.payment_method == payment_method)
        return stmt

    def get_sale(self, sale_id: int) -> SaleModel | None:
        return self.db.get(SaleModel, sale_id)

    def create_sale(self, sale: SaleModel) -> SaleModel:
        self.db.add(sale)
        self.db.commit()
        self.db.refresh(sale)
        return sale

    def sum_sale_price(self, **filters):
        stmt = self._scoped(select(func.coalesce(func.sum(SaleModel.sale_price), 0)), **filters)
        return self.db.execute(stmt).scalar() or 0

    def sum_commission(self, **filters):
        stmt = self._scoped(select(func.coalesce(func.sum(SaleModel.commission_amount), 0)), **filters)
        return self.db.execute(stmt).scalar() or 0

    def count_sales(self, **filters) -> int:
        stmt = self._scoped(select(func.count(SaleModel.id)), **filters)
        return self.db.execute(stmt).scalar() or 0

    def totals_by_seller(self, limit: int, **filters):
        total_revenue = func.coalesce(func.sum(SaleModel.sale_price), 0).label("total_revenue")
        revenue_key = _cents(func.sum(SaleModel.sale_price))
        stmt = self._scoped(
            select(
                SaleModel.seller_id,
                func.count(SaleModel.id).label("total_sales"),
                total_revenue,
                func.coalesce(func.sum(SaleModel.commission_amount), 0).label("total_commission"),
            ).group_by(SaleModel.seller_id),
            **filters,
        )
        # remis po przychodzie rozstrzyga seller_id rosnaco, sprzedaz bez sprzedawcy na koncu
        stmt = stmt.order_by(revenue_key.desc(), SaleModel.seller_id.asc().nulls_last()).limit(limit)
        return self.db.execute(stmt).all()

    def totals_by_payment_method(self, **filters):
        total_revenue = func.coalesce(func.sum(SaleModel.sale_price), 0).label("total_revenue")
        revenue_key = _cents(func.sum(SaleModel.sale_price))
        stmt = self._scoped(
            select(
                SaleModel.payment_method,
                func.count(SaleModel.id).label("total_sales"),
                total_revenue,
            ).group_by(SaleModel.payment_method),
            **filters,
        )
        stmt = stmt.order_by(revenue_key.desc(), SaleModel.payment_method.asc())
        return self.db.execute(stmt).all()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
