# standhub/services/traffic_service.py
from collections import Counter
from datetime import timedelta
from typing import Dict, Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from standhub.data.models.vehicle_view import VehicleViewModel
from standhub.domain import labels
from standhub.repos.view_repo import VehicleViewRepo
from standhub.repos.vehicle_repo import VehicleRepo
from standhub.services.sales_service import VEHICLE_NOT_FOUND
from standhub.utils.clock import Clock, utcnow, to_date
from standhub.utils.settings import DEFAULT_REPORT_LIMIT, DEFAULT_TREND_DAYS
from standhub.utils.logging import get_logger

logger = get_logger(__name__)


class TrafficService:
    """
    Wyswietlenia pojazdow.

    record_view robi dwa zapisy w jednej transakcji: inkrementacje
    vehicles.views_count i insert do vehicle_views. Albo oba, albo zaden.
    """

    def __init__(self, db: Session, clock: Clock = utcnow):
        self.repo = VehicleViewRepo(db)
        self.vehicles = VehicleRepo(db)
        self.clock = clock

    #commands
    def record_view(
        self,
        vehicle_id: int,
        user_id: int | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> bool:
        try:
            updated = self.repo.increment_views_count(vehicle_id)
            if updated == 0:
                self.repo.rollback()
                logger.warning(f"Wyswietlenie odrzucone, pojazd {vehicle_id} nie istnieje")
                return False

            self.repo.add_view(
                VehicleViewModel(
                    vehicle_id=vehicle_id,
                    user_id=user_id,
                    ip_address=ip_address,
                    user_agent=user_agent,
                    viewed_at=self.clock(),
                )
            )
            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Blad zapisu wyswietlenia pojazdu {vehicle_id}: {e}")
            return False

        return True

    def reconcile_views_count(self, vehicle_id: int | None = None) -> int:
        """Ustawia views_count = COUNT(vehicle_views) dla jednego lub wszystkich pojazdow."""
        updated = self.repo.reset_views_count(vehicle_id)
        self.repo.commit()
        logger.info(f"Przeliczono licznik wyswietlen dla {updated} pojazdow")
        return updated

    #query
    def views_count(self, vehicle_id: int, start=None, end=None) -> int:
        return self.repo.count_views(vehicle_id, start, end)

    def most_viewed(self, limit: int = DEFAULT_REPORT_LIMIT, start=None, end=None) -> List[Dict[str, Any]]:
        rows = self.repo.most_viewed(limit, start, end)
        vehicles = self.vehicles.get_vehicles(r.vehicle_id for r in rows)

        return [
            {
                "vehicle_id": r.vehicle_id,
                "vehicle_name": vehicles[r.vehicle_id].full_name if r.vehicle_id in vehicles else VEHICLE_NOT_FOUND,
                "views_count": r.views_count,
            }
            for r in rows
        ]

    def unique_visitors(self, vehicle_id: int) -> int:
        return self.repo.count_distinct(vehicle_id, VehicleViewModel.user_id)

    def unique_ips(self, vehicle_id: int) -> int:
        return self.repo.count_distinct(vehicle_id, VehicleViewModel.ip_address)

    def average_views_per_vehicle(self) -> float:
        viewed = self.repo.count_viewed_vehicles()
        if viewed == 0:
            return 0.0
        return self.repo.count_views() / viewed

    def views_trend(self, vehicle_id: int, days: int = DEFAULT_TREND_DAYS) -> List[Dict[str, Any]]:
        # tylko dni z co najmniej jednym wyswietleniem, bez dopelniania zerami
        since = self.clock() - timedelta(days=days)
        return [
            {"date": to_date(r.day), "views_count": r.views_count}
            for r in self.repo.daily_counts(vehicle_id, since)
        ]

    def views_by_device_type(self, vehicle_id: int) -> List[Dict[str, Any]]:
        return self._views_by(vehicle_id, labels.device_type)

    def views_by_browser(self, vehicle_id: int) -> List[Dict[str, Any]]:
        return self._views_by(vehicle_id, labels.browser)

    def views_by_operating_system(self, vehicle_id: int) -> List[Dict[str, Any]]:
        return self._views_by(vehicle_id, labels.operating_system)

    def _views_by(self, vehicle_id: int, classify) -> List[Dict[str, Any]]:
        counts = Counter()
        for row in self.repo.user_agent_counts(vehicle_id):
            counts[classify(row.user_agent)] += row.views_count

        ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [{"label": label, "count": count} for label, count in ordered]

    def vehicle_traffic(self, vehicle_id: int, days: int = DEFAULT_TREND_DAYS) -> Dict[str, Any]:
        if not self.vehicles.get_vehicle(vehicle_id, with_deleted=True):
            raise ValueError("Pojazd nie istnieje")

        return {
            "vehicle_id": vehicle_id,
            "views_count": self.views_count(vehicle_id),
            "unique_visitors": self.unique_visitors(vehicle_id),
            "unique_ips": self.unique_ips(vehicle_id),
            "trend": self.views_trend(vehicle_id, days),
        }
