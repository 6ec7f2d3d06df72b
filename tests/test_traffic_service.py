from datetime import date, timedelta

from sqlalchemy.exc import SQLAlchemyError

from standhub.data.models import VehicleViewModel
from standhub.services.traffic_service import TrafficService
from tests.conftest import NOW, create_stand, create_user, create_vehicle

CHROME_DESKTOP = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/120.0"
SAFARI_MOBILE = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile Safari/604.1"


def add_view(db, vehicle, viewed_at=NOW, **fields):
    db.add(VehicleViewModel(vehicle_id=vehicle.id, viewed_at=viewed_at, **fields))
    db.commit()


def test_record_view_increments_counter_and_inserts_rows(db, clock):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    svc = TrafficService(db, clock)

    for _ in range(3):
        assert svc.record_view(vehicle.id, ip_address="10.0.0.1", user_agent=CHROME_DESKTOP) is True

    db.refresh(vehicle)
    assert vehicle.views_count == 3
    assert svc.views_count(vehicle.id) == 3


def test_record_view_unknown_vehicle_writes_nothing(db, clock):
    svc = TrafficService(db, clock)

    assert svc.record_view(12345) is False
    assert svc.views_count(12345) == 0


def test_record_view_skips_soft_deleted_vehicle(db, clock):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    vehicle.soft_delete(NOW)
    db.commit()

    assert TrafficService(db, clock).record_view(vehicle.id) is False
    db.refresh(vehicle)
    assert vehicle.views_count == 0


def test_record_view_failed_insert_rolls_back_counter(db, clock, monkeypatch):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    svc = TrafficService(db, clock)

    def fail(view):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(svc.repo, "add_view", fail)

    assert svc.record_view(vehicle.id, ip_address="10.0.0.1") is False
    db.refresh(vehicle)
    assert vehicle.views_count == 0
    assert svc.views_count(vehicle.id) == 0


def test_reconcile_rebuilds_counter_from_rows(db, clock):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand, views_count=40)
    add_view(db, vehicle)
    add_view(db, vehicle)

    TrafficService(db, clock).reconcile_views_count(vehicle.id)

    db.refresh(vehicle)
    assert vehicle.views_count == 2


def test_views_count_window(db, clock):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    add_view(db, vehicle, viewed_at=NOW - timedelta(days=3))
    add_view(db, vehicle, viewed_at=NOW)

    svc = TrafficService(db, clock)

    assert svc.views_count(vehicle.id, start=date(2024, 6, 15)) == 1
    assert svc.views_count(vehicle.id, end=date(2024, 6, 12)) == 1
    assert svc.views_count(vehicle.id, start=date(2024, 6, 1), end=date(2024, 6, 15)) == 2


def test_most_viewed_ordering(db, clock):
    stand = create_stand(db)
    a = create_vehicle(db, stand, brand="Audi", model="A3", year=2021)
    b = create_vehicle(db, stand)
    c = create_vehicle(db, stand)
    for _ in range(3):
        add_view(db, c)
    add_view(db, b)
    add_view(db, a)

    rows = TrafficService(db, clock).most_viewed(limit=2)

    assert [r["vehicle_id"] for r in rows] == [c.id, a.id]
    assert rows[0]["views_count"] == 3
    assert rows[1]["vehicle_name"] == "Audi A3 2021"


def test_unique_visitors_and_ips_skip_nulls(db, clock):
    stand = create_stand(db)
    user = create_user(db)
    vehicle = create_vehicle(db, stand)
    add_view(db, vehicle, user_id=user.id, ip_address="1.1.1.1")
    add_view(db, vehicle, user_id=user.id, ip_address="2.2.2.2")
    add_view(db, vehicle)

    svc = TrafficService(db, clock)

    assert svc.unique_visitors(vehicle.id) == 1
    assert svc.unique_ips(vehicle.id) == 2


def test_views_trend_is_sparse(db, clock):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    add_view(db, vehicle, viewed_at=NOW - timedelta(days=5))
    add_view(db, vehicle, viewed_at=NOW - timedelta(days=5, hours=1))
    add_view(db, vehicle, viewed_at=NOW - timedelta(days=1))
    add_view(db, vehicle, viewed_at=NOW - timedelta(days=60))

    trend = TrafficService(db, clock).views_trend(vehicle.id, days=30)

    assert trend == [
        {"date": date(2024, 6, 10), "views_count": 2},
        {"date": date(2024, 6, 14), "views_count": 1},
    ]


def test_views_by_device_and_browser(db, clock):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    add_view(db, vehicle, user_agent=CHROME_DESKTOP)
    add_view(db, vehicle, user_agent=CHROME_DESKTOP)
    add_view(db, vehicle, user_agent=SAFARI_MOBILE)
    add_view(db, vehicle)

    svc = TrafficService(db, clock)

    assert svc.views_by_device_type(vehicle.id) == [
        {"label": "Desktop", "count": 2},
        {"label": "Desconhecido", "count": 1},
        {"label": "Mobile", "count": 1},
    ]
    assert svc.views_by_browser(vehicle.id)[0] == {"label": "Chrome", "count": 2}


def test_average_views_per_vehicle(db, clock):
    stand = create_stand(db)
    a = create_vehicle(db, stand)
    b = create_vehicle(db, stand)
    svc = TrafficService(db, clock)

    assert svc.average_views_per_vehicle() == 0.0

    add_view(db, a)
    add_view(db, a)
    add_view(db, a)
    add_view(db, b)

    assert svc.average_views_per_vehicle() == 2.0


def test_views_by_operating_system(db, clock):
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    add_view(db, vehicle, user_agent=CHROME_DESKTOP)
    add_view(db, vehicle, user_agent="Mozilla/5.0 (Linux; Android 14) Chrome/120.0")

    assert TrafficService(db, clock).views_by_operating_system(vehicle.id) == [
        {"label": "Linux", "count": 1},
        {"label": "Windows", "count": 1},
    ]
