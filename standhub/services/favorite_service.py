# standhub/services/favorite_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from standhub.data.models.favorite import FavoriteModel
from standhub.data.models.vehicle import VehicleModel
from standhub.repos.favorite_repo import FavoriteRepo
from standhub.repos.user_repo import UserRepo
from standhub.repos.vehicle_repo import VehicleRepo
from standhub.utils.logging import get_logger

logger = get_logger(__name__)


class FavoriteService:
    """Para (user_id, vehicle_id) jest unikalna."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = FavoriteRepo(db)
        self.users = UserRepo(db)
        self.vehicles = VehicleRepo(db)

    def is_favorited(self, user_id: int, vehicle_id: int) -> bool:
        return self.repo.get_favorite(user_id, vehicle_id) is not None

    def add(self, user_id: int, vehicle_id: int) -> bool:
        if not self.users.get_user(user_id):
            raise ValueError("Uzytkownik nie istnieje")
        if not self.vehicles.get_vehicle(vehicle_id):
            raise ValueError("Pojazd nie istnieje")

        if self.is_favorited(user_id, vehicle_id):
            return False

        try:
            self.repo.add_favorite(FavoriteModel(user_id=user_id, vehicle_id=vehicle_id))
        except IntegrityError:
            # rownolegly insert tej samej pary
            self.db.rollback()
            return False

        logger.info(f"Uzytkownik {user_id} dodal pojazd {vehicle_id} do ulubionych")
        return True

    def remove(self, user_id: int, vehicle_id: int) -> bool:
        return self.repo.delete_favorite(user_id, vehicle_id) > 0

    def toggle(self, user_id: int, vehicle_id: int) -> bool:
        """Zwraca True gdy pojazd jest ulubiony po operacji."""
        if self.is_favorited(user_id, vehicle_id):
            self.remove(user_id, vehicle_id)
            return False
        return self.add(user_id, vehicle_id)

    def vehicle_favorites_count(self, vehicle_id: int) -> int:
        return self.repo.count_for_vehicle(vehicle_id)

    def user_favorites_count(self, user_id: int) -> int:
        return self.repo.count_for_user(user_id)

    def user_favorites(self, user_id: int) -> list[VehicleModel]:
        return self.repo.vehicles_for_user(user_id)
