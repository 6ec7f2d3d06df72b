from datetime import date

from sqlalchemy.orm import sessionmaker

from standhub.data.models import VehicleImageModel
from tests.conftest import create_stand, create_user, create_vehicle, create_sale


def test_stand_lifecycle(client, engine):
    r = client.post(
        "/stands",
        json={
            "name": "Auto Porto",
            "city": "Porto",
            "business_hours": {"monday": {"open": "09:00", "close": "19:00"}},
        },
    )
    assert r.status_code == 201
    stand = r.json()
    assert stand["slug"] == "auto-porto"
    assert stand["has_coordinates"] is False

    r = client.post("/stands", json={"name": "Auto Porto"})
    assert r.json()["slug"] == "auto-porto-1"

    r = client.get(f"/stands/{stand['id']}/open", params={"day": "monday", "at": "10:30"})
    assert r.json() == {"stand_id": stand["id"], "is_open": True}
    r = client.get(f"/stands/{stand['id']}/open", params={"day": "sunday", "at": "10:30"})
    assert r.json()["is_open"] is False
    assert client.get(f"/stands/{stand['id']}/open", params={"day": "someday"}).status_code == 400

    assert client.delete(f"/stands/{stand['id']}").status_code == 204
    assert client.get(f"/stands/{stand['id']}/sales-totals").status_code == 404

    r = client.post(f"/stands/{stand['id']}/restore")
    assert r.status_code == 200
    assert client.get(f"/stands/{stand['id']}/sales-totals").status_code == 200

    assert client.delete("/stands/999").status_code == 404


def test_stand_sales_totals(client, engine):
    db = sessionmaker(bind=engine)()
    stand = create_stand(db)
    seller = create_user(db)
    vehicle = create_vehicle(db, stand)
    create_sale(db, vehicle, seller, 10000, sale_date=date(2024, 5, 10))
    create_sale(db, vehicle, seller, 30000, sale_date=date(2024, 5, 20))
    stand_id = stand.id
    db.close()

    r = client.get(f"/stands/{stand_id}/sales-totals")
    assert r.status_code == 200
    body = r.json()
    assert float(body["total_sales_value"]) == 40000.0
    assert float(body["total_commission_value"]) == 2000.0


def test_create_vehicle_and_soft_delete(client, engine):
    db = sessionmaker(bind=engine)()
    stand_id = create_stand(db).id
    db.close()

    r = client.post(
        "/vehicles",
        json={
            "stand_id": stand_id,
            "brand": "Seat",
            "model": "Leon",
            "year": 2022,
            "price": "18000",
            "discount_percentage": "10",
            "fuel_type": "diesel",
            "features": ["gps", "abs", "gps"],
        },
    )
    assert r.status_code == 201
    vehicle = r.json()
    assert vehicle["reference"].startswith("VH")
    assert vehicle["full_name"] == "Seat Leon 2022"
    assert float(vehicle["current_price"]) == 16200.0
    assert vehicle["features"] == ["abs", "gps"]
    assert vehicle["status"] == "available"

    assert client.delete(f"/vehicles/{vehicle['id']}").status_code == 204
    assert client.delete(f"/vehicles/{vehicle['id']}").status_code == 404
    assert client.post(f"/vehicles/{vehicle['id']}/restore").status_code == 200


def test_create_vehicle_validation(client):
    r = client.post("/vehicles", json={"stand_id": 999, "brand": "Seat", "model": "Leon", "year": 2022, "price": "1"})
    assert r.status_code == 404

    r = client.post(
        "/vehicles",
        json={"stand_id": 1, "brand": "Seat", "model": "Leon", "year": 2022, "price": "1", "fuel_type": "steam"},
    )
    assert r.status_code == 422


def test_vehicle_images_primary_and_position(client, engine):
    db = sessionmaker(bind=engine)()
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand)
    images = [VehicleImageModel(vehicle_id=vehicle.id, url=f"/img/{i}.jpg", order_index=i) for i in range(3)]
    images[0].is_primary = True
    db.add_all(images)
    db.commit()
    ids = [img.id for img in images]
    db.close()

    r = client.post(f"/vehicles/images/{ids[1]}/primary")
    assert r.status_code == 200
    assert r.json()["is_primary"] is True

    r = client.post(f"/vehicles/images/{ids[2]}/position", json={"position": 0})
    assert r.status_code == 200
    assert [img["id"] for img in r.json()] == [ids[2], ids[0], ids[1]]
    assert [img["order_index"] for img in r.json()] == [0, 1, 2]
    assert [img["is_primary"] for img in r.json()] == [False, False, True]

    assert client.post("/vehicles/images/999/primary").status_code == 404


def test_inquiry_endpoints(client, engine):
    db = sessionmaker(bind=engine)()
    stand_id = create_stand(db, name="Stand Braga").id
    seller_id = create_user(db, name="Tiago").id
    db.close()

    r = client.post(
        "/inquiries",
        json={"stand_id": stand_id, "name": "Ana", "email": "ana@example.com", "inquiry_type": "test_drive"},
    )
    assert r.status_code == 201
    inquiry = r.json()
    assert inquiry["status"] == "new"
    assert inquiry["inquiry_type_label"] == "Teste de Condução"

    inquiry_id = inquiry["id"]
    r = client.post(f"/inquiries/{inquiry_id}/assign", json={"user_id": seller_id})
    assert r.json()["assigned_to"] == seller_id

    client.post(f"/inquiries/{inquiry_id}/notes", json={"notes": "Ligar amanha"})
    r = client.post(f"/inquiries/{inquiry_id}/notes", json={"notes": "Cliente confirmou"})
    assert r.json()["notes"] == "Ligar amanha\n\nCliente confirmou"

    r = client.patch(f"/inquiries/{inquiry_id}/status", json={"status": "contacted"})
    assert r.status_code == 200
    assert r.json()["status_label"] == "Contactado"

    r = client.get(f"/inquiries/{inquiry_id}")
    assert r.status_code == 200
    assert r.json()["summary"] == "Inquérito de Ana (Teste de Condução)"
    assert r.json()["assigned_user_name"] == "Tiago"
    assert r.json()["stand_name"] == "Stand Braga"

    r = client.delete(f"/inquiries/{inquiry_id}/assign")
    assert r.json()["assigned_to"] is None

    assert client.get("/inquiries/overdue").json() == []


def test_inquiry_endpoint_errors(client, engine):
    db = sessionmaker(bind=engine)()
    stand_id = create_stand(db).id
    db.close()

    r = client.post("/inquiries", json={"stand_id": 999, "name": "Ana", "email": "ana@example.com"})
    assert r.status_code == 404

    r = client.post("/inquiries", json={"stand_id": stand_id, "name": "Ana", "email": "a@b.pt", "inquiry_type": "spam"})
    assert r.status_code == 422

    assert client.get("/inquiries/999").status_code == 404
    assert client.patch("/inquiries/999/status", json={"status": "lost"}).status_code == 404
    assert client.patch("/inquiries/999/status", json={"status": "archived"}).status_code == 422

    inquiry_id = client.post("/inquiries", json={"stand_id": stand_id, "name": "Ana", "email": "a@b.pt"}).json()["id"]
    assert client.post(f"/inquiries/{inquiry_id}/assign", json={"user_id": 999}).status_code == 404


def test_favorite_toggle_endpoint(client, engine):
    db = sessionmaker(bind=engine)()
    stand = create_stand(db)
    user_id = create_user(db).id
    vehicle_id = create_vehicle(db, stand).id
    db.close()

    r = client.post(f"/favorites/{vehicle_id}/toggle", params={"user_id": user_id})
    assert r.status_code == 200
    assert r.json() == {"vehicle_id": vehicle_id, "favorited": True, "favorites_count": 1}

    r = client.get(f"/favorites/users/{user_id}")
    assert [v["id"] for v in r.json()] == [vehicle_id]

    r = client.post(f"/favorites/{vehicle_id}/toggle", params={"user_id": user_id})
    assert r.json()["favorited"] is False

    r = client.get(f"/favorites/vehicles/{vehicle_id}/count")
    assert r.json() == {"vehicle_id": vehicle_id, "favorites_count": 0}

    assert client.post("/favorites/999/toggle", params={"user_id": user_id}).status_code == 404
    assert client.post(f"/favorites/{vehicle_id}/toggle", params={"user_id": 999}).status_code == 404
