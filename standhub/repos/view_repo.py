# standhub/repos/view_repo.py
from sqlalchemy import select, update, func, distinct
from sqlalchemy.orm import Session

from standhub.data.models.vehicle import VehicleModel
from standhub.data.models.vehicle_view import VehicleViewModel
from standhub.repos.filters import datetime_window


class VehicleViewRepo:
    def __init__(self, db: Session):
        self.db = db

    def increment_views_count(self, vehicle_id: int) -> int:
        # UPDATE ... SET views_count = views_count + 1, atomowe po stronie bazy
        result = self.db.execute(
            update(VehicleModel)
            .where(VehicleModel.id == vehicle_id, VehicleModel.deleted_at.is_(None))
            .values(views_count=VehicleModel.views_count + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def add_view(self, view: VehicleViewModel) -> VehicleViewModel:
        self.db.add(view)
        self.db.flush()
        return view

    def count_views(self, vehicle_id: int | None = None, start=None, end=None) -> int:
        stmt = select(func.count(VehicleViewModel.id))
        if vehicle_id is not None:
            stmt = stmt.where(VehicleViewModel.vehicle_id == vehicle_id)
        stmt = datetime_window(stmt, VehicleViewModel.viewed_at, start, end)
        return self.db.execute(stmt).scalar() or 0

    def count_viewed_vehicles(self) -> int:
        stmt = select(func.count(distinct(VehicleViewModel.vehicle_id)))
        return self.db.execute(stmt).scalar() or 0

    def most_viewed(self, limit: int, start=None, end=None):
        views_count = func.count(VehicleViewModel.id).label("views_count")
        stmt = select(VehicleViewModel.vehicle_id, views_count).group_by(VehicleViewModel.vehicle_id)
        stmt = datetime_window(stmt, VehicleViewModel.viewed_at, start, end)
        stmt = stmt.order_by(views_count.desc(), VehicleViewModel.vehicle_id.asc()).limit(limit)
        return self.db.execute(stmt).all()

    def count_distinct(self, vehicle_id: int, column) -> int:
        stmt = select(func.count(distinct(column))).where(
            VehicleViewModel.vehicle_id == vehicle_id,
            column.is_not(None),
        )
        return self.db.execute(stmt).scalar() or 0

    def daily_counts(self, vehicle_id: int, since):
        day = func.date(VehicleViewModel.viewed_at).label("day")
        stmt = (
            select(day, func.count(VehicleViewModel.id).label("views_count"))
            .where(
                VehicleViewModel.vehicle_id == vehicle_id,
                VehicleViewModel.viewed_at >= since,
            )
            .group_by(day)
            .order_by(day)
        )
        return self.db.execute(stmt).all()

    def user_agent_counts(self, vehicle_id: int):
        stmt = (
            select(VehicleViewModel.user_agent, func.count(VehicleViewModel.id).label("views_count"))
            .where(VehicleViewModel.vehicle_id == vehicle_id)
            .group_by(VehicleViewModel.user_agent)
        )
        return self.db.execute(stmt).all()

    def reset_views_count(self, vehicle_id: int | None = None) -> int:
        counted = (
            select(func.count(VehicleViewModel.id))
            .where(VehicleViewModel.vehicle_id == VehicleModel.id)
            .scalar_subquery()
        )
        stmt = update(VehicleModel).values(views_count=counted)
        if vehicle_id is not None:
            stmt = stmt.where(VehicleModel.id == vehicle_id)
        result = self.db.execute(stmt.execution_options(synchronize_session=False))
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
