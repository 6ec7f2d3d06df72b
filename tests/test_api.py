from datetime import date
from decimal import Decimal

from sqlalchemy.orm import sessionmaker

from tests.conftest import create_stand, create_user, create_vehicle, create_sale


def seed(engine):
    db = sessionmaker(bind=engine)()
    stand = create_stand(db)
    seller = create_user(db, name="Ana")
    vehicle = create_vehicle(db, stand)
    create_sale(db, vehicle, seller, 10000, sale_date=date(2024, 5, 10))
    create_sale(db, vehicle, seller, 30000, sale_date=date(2024, 5, 20))
    ids = {"stand": stand.id, "seller": seller.id, "vehicle": vehicle.id}
    db.close()
    return ids


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "connected"}


def test_commission_endpoint(client):
    r = client.get("/sales/commission", params={"sale_price": "1000", "commission_percentage": "5"})
    assert r.status_code == 200
    assert Decimal(str(r.json()["commission_amount"])) == Decimal("50")


def test_sales_summary(client, engine):
    seed(engine)

    r = client.get("/sales/summary", params={"start": "2024-05-01", "end": "2024-05-15"})
    assert r.status_code == 200
    body = r.json()
    assert body["total_sales"] == 1
    assert Decimal(str(body["total_revenue"])) == Decimal("10000")


def test_sales_summary_rejects_inverted_window(client):
    r = client.get("/sales/summary", params={"start": "2024-05-15", "end": "2024-05-01"})
    assert r.status_code == 400


def test_top_sellers_endpoint(client, engine):
    ids = seed(engine)

    r = client.get("/sales/top-sellers", params={"limit": 5})
    assert r.status_code == 200
    assert r.json()[0]["seller_id"] == ids["seller"]
    assert r.json()[0]["seller_name"] == "Ana"


def test_recompute_missing_sale_is_404(client):
    r = client.post("/sales/999/commission/recompute")
    assert r.status_code == 404


def test_record_view_and_traffic(client, engine):
    ids = seed(engine)
    vehicle_id = ids["vehicle"]

    for _ in range(2):
        r = client.post(
            f"/traffic/vehicles/{vehicle_id}/views",
            json={"ip_address": "10.0.0.1", "user_agent": "Mozilla/5.0 (Windows NT 10.0) Chrome/120.0"},
        )
        assert r.status_code == 201
        assert r.json() == {"success": True}

    r = client.get(f"/traffic/vehicles/{vehicle_id}")
    assert r.status_code == 200
    body = r.json()
    assert body["views_count"] == 2
    assert body["unique_ips"] == 1
    assert body["unique_visitors"] == 0
    assert sum(point["views_count"] for point in body["trend"]) == 2

    r = client.get(f"/traffic/vehicles/{vehicle_id}/browsers")
    assert r.json() == [{"label": "Chrome", "count": 2}]

    r = client.get(f"/traffic/vehicles/{vehicle_id}/operating-systems")
    assert r.json() == [{"label": "Windows", "count": 2}]

    r = client.get("/traffic/most-viewed")
    assert r.json()[0]["vehicle_id"] == vehicle_id


def test_record_view_unknown_vehicle(client):
    r = client.post("/traffic/vehicles/999/views", json={})
    assert r.status_code == 400

    r = client.get("/traffic/vehicles/999")
    assert r.status_code == 404


def test_user_performance_endpoint(client, engine):
    ids = seed(engine)

    r = client.get(f"/users/{ids['seller']}/performance")
    assert r.status_code == 200
    body = r.json()
    assert body["total_sales"] == 2
    # 20 + 0 + 20
    assert body["performance_rating"] == 40.0
    assert body["performance_level"] == "Regular"

    assert client.get("/users/999/performance").status_code == 404


def test_audit_reports_empty(client):
    for path in ("/audit/most-active-users", "/audit/actions", "/audit/tables", "/audit/trend", "/audit/by-hour", "/audit/by-weekday"):
        r = client.get(path)
        assert r.status_code == 200
        assert r.json() == []


def test_traffic_and_audit_reject_inverted_window(client):
    params = {"start": "2024-05-15", "end": "2024-05-01"}
    paths = (
        "/traffic/most-viewed",
        "/audit/most-active-users",
        "/audit/actions",
        "/audit/tables",
        "/audit/by-hour",
        "/audit/by-weekday",
    )
    for path in paths:
        r = client.get(path, params=params)
        assert r.status_code == 400, path


def test_single_day_window_is_accepted(client):
    r = client.get("/audit/by-hour", params={"start": "2024-05-15", "end": "2024-05-15"})
    assert r.status_code == 200
