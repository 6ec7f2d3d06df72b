from datetime import datetime, date, timezone
from decimal import Decimal
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from standhub.data.database import Base, get_db
from standhub.data.models import (
    StandModel,
    UserModel,
    VehicleModel,
    SaleModel,
    InquiryModel,
)
from standhub.main import create_app

# sobota, 15 czerwca 2024, 12:00 UTC
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

_seq = count(1)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def clock():
    return lambda: NOW


@pytest.fixture()
def client(engine):
    app = create_app()
    testing_session = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        session = testing_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


def create_stand(db, **fields) -> StandModel:
    n = next(_seq)
    stand = StandModel(name=fields.pop("name", f"Stand {n}"), slug=fields.pop("slug", f"stand-{n}"), **fields)
    db.add(stand)
    db.commit()
    return stand


def create_user(db, role="seller", **fields) -> UserModel:
    n = next(_seq)
    user = UserModel(
        name=fields.pop("name", f"Seller {n}"),
        email=fields.pop("email", f"user{n}@example.com"),
        role=role,
        **fields,
    )
    db.add(user)
    db.commit()
    return user


def create_vehicle(db, stand, **fields) -> VehicleModel:
    n = next(_seq)
    vehicle = VehicleModel(
        stand_id=stand.id,
        reference=fields.pop("reference", f"VH{n:06d}"),
        brand=fields.pop("brand", "Toyota"),
        model=fields.pop("model", "Corolla"),
        year=fields.pop("year", 2020),
        price=fields.pop("price", Decimal("15000.00")),
        **fields,
    )
    db.add(vehicle)
    db.commit()
    return vehicle


def create_sale(db, vehicle, seller, sale_price, sale_date=date(2024, 6, 1), commission_percentage=5, **fields) -> SaleModel:
    price = Decimal(str(sale_price))
    pct = Decimal(str(commission_percentage))
    sale = SaleModel(
        vehicle_id=vehicle.id if vehicle else None,
        seller_id=seller.id if seller else None,
        stand_id=vehicle.stand_id if vehicle else None,
        customer_name="Cliente",
        sale_price=price,
        commission_percentage=pct,
        commission_amount=fields.pop("commission_amount", price * pct / 100),
        sale_date=sale_date,
        payment_method=fields.pop("payment_method", "cash"),
        **fields,
    )
    db.add(sale)
    db.commit()
    return sale


def create_inquiry(db, stand, assigned_to=None, status="new", created_at=NOW, **fields) -> InquiryModel:
    inquiry = InquiryModel(
        stand_id=stand.id,
        name=fields.pop("name", "Ana"),
        email=fields.pop("email", "ana@example.com"),
        status=status,
        assigned_to=assigned_to.id if assigned_to else None,
        created_at=created_at,
        **fields,
    )
    db.add(inquiry)
    db.commit()
    return inquiry
