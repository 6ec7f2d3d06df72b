from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker

from standhub.domain import labels
from standhub.domain.labels import PaymentMethod, PAYMENT_METHOD_LABELS, label_for
from standhub.tasks import commissions, views
from tests.conftest import create_stand, create_user, create_vehicle, create_sale


@pytest.mark.parametrize(
    "value, expected",
    [("cash", "Dinheiro"), ("trade_in", "Troca"), ("crypto", "Desconhecido"), (None, "Desconhecido")],
)
def test_label_for_falls_back_to_unknown(value, expected):
    assert label_for(PaymentMethod, PAYMENT_METHOD_LABELS, value) == expected


def test_table_name_label():
    assert labels.table_name_label("sales") == "Vendas"
    assert labels.table_name_label("stock_movements") == "Stock movements"


@pytest.mark.parametrize(
    "user_agent, device, browser, system",
    [
        ("Mozilla/5.0 (Windows NT 10.0; Win64) Chrome/120.0", "Desktop", "Chrome", "Windows"),
        ("Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Firefox/121.0", "Desktop", "Firefox", "Linux"),
        ("Mozilla/5.0 (iPad; Tablet) Safari/604.1", "Tablet", "Safari", "Outro"),
        ("curl/8.4.0", "Desktop", "Outro", "Outro"),
        (None, "Desconhecido", "Desconhecido", "Desconhecido"),
    ],
)
def test_user_agent_classification(user_agent, device, browser, system):
    assert labels.device_type(user_agent) == device
    assert labels.browser(user_agent) == browser
    assert labels.operating_system(user_agent) == system


def test_recompute_commission_task(engine, db, monkeypatch):
    monkeypatch.setattr(commissions, "SessionLocal", sessionmaker(bind=engine))
    stand = create_stand(db)
    seller = create_user(db)
    vehicle = create_vehicle(db, stand)
    sale = create_sale(db, vehicle, seller, 2000, commission_percentage=10, commission_amount=Decimal("0"))

    result = commissions.recompute_commission_task.run(sale.id)

    assert result == {"sale_id": sale.id, "commission_amount": "200.00"}


def test_reconcile_view_counters_task(engine, db, monkeypatch):
    monkeypatch.setattr(views, "SessionLocal", sessionmaker(bind=engine))
    stand = create_stand(db)
    vehicle = create_vehicle(db, stand, views_count=9)

    result = views.reconcile_view_counters_task.run()

    assert result == {"vehicles": 1}
    db.refresh(vehicle)
    assert vehicle.views_count == 0
