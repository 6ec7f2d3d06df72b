# standhub/services/performance_service.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any

from sqlalchemy.orm import Session

from standhub.data.models.user import UserModel
from standhub.domain.labels import UserRole
from standhub.domain.scoring import (
    PerformanceWeights,
    DEFAULT_WEIGHTS,
    conversion_rate,
    performance_rating,
    performance_level,
)
from standhub.repos.user_repo import UserRepo
from standhub.services.sales_service import CENT, to_money
from standhub.utils.clock import Clock, utcnow, as_utc
from standhub.utils.logging import get_logger

logger = get_logger(__name__)

ONLINE_WINDOW_MINUTES = 15

_ADMIN = UserRole.ADMIN.value
_MANAGER = UserRole.MANAGER.value
_SELLER = UserRole.SELLER.value

# akcja -> role, ktore moga ja wykonac
PERMISSIONS = {
    "manage_users": {_ADMIN, _MANAGER},
    "manage_stands": {_ADMIN},
    "manage_vehicles": {_ADMIN, _MANAGER, _SELLER},
    "view_reports": {_ADMIN, _MANAGER},
    "manage_sales": {_ADMIN, _MANAGER, _SELLER},
    "view_analytics": {_ADMIN, _MANAGER},
}


def can_perform(role: str, action: str) -> bool:
    return role in PERMISSIONS.get(action, ())


class PerformanceService:
    def __init__(
        self,
        db: Session,
        weights: PerformanceWeights = DEFAULT_WEIGHTS,
        clock: Clock = utcnow,
    ):
        self.repo = UserRepo(db)
        self.weights = weights
        self.clock = clock

    def _get_user(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise ValueError("Uzytkownik nie istnieje")
        return user

    def user_stats(self, user_id: int) -> Dict[str, Any]:
        user = self._get_user(user_id)

        sales = self.repo.sales_totals(user.id)
        inquiries = self.repo.inquiry_counts(user.id)

        total_sales = sales.total_sales or 0
        total_revenue = to_money(sales.total_revenue)
        if total_sales:
            average = (Decimal(str(sales.total_revenue)) / total_sales).quantize(CENT, rounding=ROUND_HALF_UP)
        else:
            average = Decimal("0.00")

        assigned = int(inquiries.assigned or 0)
        converted = int(inquiries.converted or 0)

        return {
            "user_id": user.id,
            "name": user.name,
            "role_label": user.role_label,
            "total_sales": total_sales,
            "total_revenue": total_revenue,
            "total_commission": to_money(sales.total_commission),
            "average_sale_value": average,
            "assigned_inquiries": assigned,
            "pending_inquiries": int(inquiries.pending or 0),
            "converted_inquiries": converted,
            "conversion_rate": conversion_rate(converted, assigned),
        }

    def performance(self, user_id: int) -> Dict[str, Any]:
        stats = self.user_stats(user_id)
        rating = performance_rating(
            stats["total_sales"],
            stats["conversion_rate"],
            stats["average_sale_value"],
            self.weights,
        )
        stats["performance_rating"] = rating
        stats["performance_level"] = performance_level(rating, self.weights)
        return stats

    def performance_rating(self, user_id: int) -> float:
        return self.performance(user_id)["performance_rating"]

    def can_perform(self, user_id: int, action: str) -> bool:
        return can_perform(self._get_user(user_id).role, action)

    def require(self, user_id: int, action: str):
        if not self.can_perform(user_id, action):
            raise PermissionError("Brak uprawnien do tej operacji")

    def calculate_user_commission(self, user_id: int, sale_amount) -> Decimal:
        user = self._get_user(user_id)
        rate = Decimal(str(user.commission_rate or 0))
        return (Decimal(str(sale_amount)) * rate / 100).quantize(CENT, rounding=ROUND_HALF_UP)

    def is_online(self, user_id: int) -> bool:
        user = self._get_user(user_id)
        if not user.last_login_at:
            return False
        elapsed = self.clock() - as_utc(user.last_login_at)
        return elapsed.total_seconds() < ONLINE_WINDOW_MINUTES * 60

    def update_last_login(self, user_id: int) -> UserModel:
        user = self._get_user(user_id)
        user.last_login_at = self.clock()
        self.repo.commit()
        logger.info(f"Uzytkownik {user_id} zalogowany")
        return user

    def delete_user(self, user_id: int) -> UserModel:
        user = self._get_user(user_id)
        user.soft_delete(self.clock())
        self.repo.commit()
        logger.info(f"Uzytkownik {user_id} oznaczony jako usuniety")
        return user

    def restore_user(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id, with_deleted=True)
        if not user:
            raise ValueError("Uzytkownik nie istnieje")
        user.restore()
        self.repo.commit()
        return user
