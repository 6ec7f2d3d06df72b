# standhub/repos/favorite_repo.py
from sqlalchemy import select, delete, func
from sqlalchemy.orm import Session

from standhub.data.models.favorite import FavoriteModel
from standhub.data.models.vehicle import VehicleModel


class FavoriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_favorite(self, user_id: int, vehicle_id: int) -> FavoriteModel | None:
        stmt = select(FavoriteModel).where(
            FavoriteModel.user_id == user_id,
            FavoriteModel.vehicle_id == vehicle_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add_favorite(self, favorite: FavoriteModel) -> FavoriteModel:
        self.db.add(favorite)
        self.db.commit()
        self.db.refresh(favorite)
        return favorite

    def delete_favorite(self, user_id: int, vehicle_id: int) -> int:
        result = self.db.execute(
            delete(FavoriteModel).where(
                FavoriteModel.user_id == user_id,
                FavoriteModel.vehicle_id == vehicle_id,
            )
        )
        self.db.commit()
        return result.rowcount

    def count_for_vehicle(self, vehicle_id: int) -> int:
        stmt = select(func.count(FavoriteModel.id)).where(FavoriteModel.vehicle_id == vehicle_id)
        return self.db.execute(stmt).scalar() or 0

    def count_for_user(self, user_id: int) -> int:
        stmt = select(func.count(FavoriteModel.id)).where(FavoriteModel.user_id == user_id)
        return self.db.execute(stmt).scalar() or 0

    def vehicles_for_user(self, user_id: int) -> list[VehicleModel]:
        stmt = (
            select(VehicleModel)
            .join(FavoriteModel, FavoriteModel.vehicle_id == VehicleModel.id)
            .where(FavoriteModel.user_id == user_id, VehicleModel.deleted_at.is_(None))
            .order_by(FavoriteModel.created_at.desc(), FavoriteModel.id.desc())
        )
        return list(self.db.execute(stmt).scalars())
