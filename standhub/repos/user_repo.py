# standhub/repos/user_repo.py
from sqlalchemy import select, func, case
from sqlalchemy.orm import Session

from standhub.data.models.user import UserModel
from standhub.data.models.sale import SaleModel
from standhub.data.models.inquiry import InquiryModel
from standhub.domain.labels import InquiryStatus


def _count_where(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int, with_deleted: bool = False) -> UserModel | None:
        user = self.db.get(UserModel, user_id)
        if user is None or (user.is_deleted and not with_deleted):
            return None
        return user

    def get_users(self, user_ids) -> dict[int, UserModel]:
        ids = {i for i in user_ids if i is not None}
        if not ids:
            return {}
        stmt = select(UserModel).where(UserModel.id.in_(ids), UserModel.deleted_at.is_(None))
        return {u.id: u for u in self.db.execute(stmt).scalars()}

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def sales_totals(self, user_id: int):
        stmt = select(
            func.count(SaleModel.id).label("total_sales"),
            func.coalesce(func.sum(SaleModel.sale_price), 0).label("total_revenue"),
            func.coalesce(func.sum(SaleModel.commission_amount), 0).label("total_commission"),
        ).where(SaleModel.seller_id == user_id)
        return self.db.execute(stmt).one()

    def inquiry_counts(self, user_id: int):
        stmt = select(
            func.count(InquiryModel.id).label("assigned"),
            _count_where(InquiryModel.status == InquiryStatus.NEW.value).label("pending"),
            _count_where(InquiryModel.status == InquiryStatus.CONVERTED.value).label("converted"),
        ).where(InquiryModel.assigned_to == user_id)
        return self.db.execute(stmt).one()

    def commit(self):
        self.db.commit()
