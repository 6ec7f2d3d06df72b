# standhub/repos/vehicle_repo.py
from sqlalchemy import select, exists
from sqlalchemy.orm import Session

from standhub.data.models.vehicle import VehicleModel
from standhub.data.models.vehicle_image import VehicleImageModel


class VehicleRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_vehicle(self, vehicle_id: int, with_deleted: bool = False) -> VehicleModel | None:
        vehicle = self.db.get(VehicleModel, vehicle_id)
        if vehicle is None or (vehicle.is_deleted and not with_deleted):
            return None
        return vehicle

    def get_vehicles(self, vehicle_ids) -> dict[int, VehicleModel]:
        ids = {i for i in vehicle_ids if i is not None}
        if not ids:
            return {}
        stmt = select(VehicleModel).where(VehicleModel.id.in_(ids), VehicleModel.deleted_at.is_(None))
        return {v.id: v for v in self.db.execute(stmt).scalars()}

    def reference_exists(self, reference: str) -> bool:
        return self.db.execute(select(exists().where(VehicleModel.reference == reference))).scalar()

    def create_vehicle(self, vehicle: VehicleModel) -> VehicleModel:
        self.db.add(vehicle)
        self.db.commit()
        self.db.refresh(vehicle)
        return vehicle

    def get_image(self, image_id: int) -> VehicleImageModel | None:
        return self.db.get(VehicleImageModel, image_id)

    def get_images(self, vehicle_id: int) -> list[VehicleImageModel]:
        stmt = (
            select(VehicleImageModel)
            .where(VehicleImageModel.vehicle_id == vehicle_id)
            .order_by(VehicleImageModel.order_index, VehicleImageModel.id)
        )
        return list(self.db.execute(stmt).scalars())

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
