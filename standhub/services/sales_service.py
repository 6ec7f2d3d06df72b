# standhub/services/sales_service.py
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from standhub.data.models.sale import SaleModel
from standhub.domain.labels import PaymentMethod, PAYMENT_METHOD_LABELS, label_for
from standhub.repos.sale_repo import SaleRepo
from standhub.repos.user_repo import UserRepo
from standhub.repos.vehicle_repo import VehicleRepo
from standhub.repos.stand_repo import StandRepo
from standhub.utils.clock import Clock, utcnow
from standhub.utils.settings import DEFAULT_REPORT_LIMIT
from standhub.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")

VEHICLE_NOT_FOUND = "Veículo não encontrado"
SELLER_NOT_FOUND = "Vendedor não encontrado"
STAND_NOT_FOUND = "Stand não encontrado"


def to_money(value) -> Decimal:
    # sqlite oddaje SUM jako float, postgres jako Decimal
    return Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP)


class SalesService:
    """
    Agregacje sprzedazy: przychod, prowizje, ranking sprzedawcow.
    Okno [start, end] jest domkniete i porownywane z sale_date,
    kazda granica jest opcjonalna.
    """

    def __init__(self, db: Session, clock: Clock = utcnow):
        self.repo = SaleRepo(db)
        self.users = UserRepo(db)
        self.vehicles = VehicleRepo(db)
        self.stands = StandRepo(db)
        self.clock = clock

    @staticmethod
    def calculate_commission(sale_price, commission_percentage) -> Decimal:
        price = Decimal(str(sale_price))
        pct = Decimal(str(commission_percentage))
        return (price * pct / 100).quantize(CENT, rounding=ROUND_HALF_UP)

    #query
    def total_revenue(self, start: date | None = None, end: date | None = None, **filters) -> Decimal:
        return to_money(self.repo.sum_sale_price(start=start, end=end, **filters))

    def total_commission(self, start: date | None = None, end: date | None = None, **filters) -> Decimal:
        return to_money(self.repo.sum_commission(start=start, end=end, **filters))

    def sales_count(self, start: date | None = None, end: date | None = None, **filters) -> int:
        return self.repo.count_sales(start=start, end=end, **filters)

    def average_sale_value(self, start: date | None = None, end: date | None = None, **filters) -> Decimal:
        count = self.repo.count_sales(start=start, end=end, **filters)
        if count == 0:
            return Decimal("0.00")
        total = Decimal(str(self.repo.sum_sale_price(start=start, end=end, **filters)))
        return (total / count).quantize(CENT, rounding=ROUND_HALF_UP)

    def summary(self, start: date | None = None, end: date | None = None, **filters) -> Dict[str, Any]:
        return {
            "start": start,
            "end": end,
            "total_sales": self.sales_count(start, end, **filters),
            "total_revenue": self.total_revenue(start, end, **filters),
            "total_commission": self.total_commission(start, end, **filters),
            "average_sale_value": self.average_sale_value(start, end, **filters),
        }

    def top_sellers(
        self,
        start: date | None = None,
        end: date | None = None,
        limit: int = DEFAULT_REPORT_LIMIT,
        **filters,
    ) -> List[Dict[str, Any]]:
        rows = self.repo.totals_by_seller(limit, start=start, end=end, **filters)
        sellers = self.users.get_users(r.seller_id for r in rows)

        return [
            {
                "seller_id": r.seller_id,
                "seller_name": sellers[r.seller_id].name if r.seller_id in sellers else SELLER_NOT_FOUND,
                "total_sales": r.total_sales,
                "total_revenue": to_money(r.total_revenue),
                "total_commission": to_money(r.total_commission),
            }
            for r in rows
        ]

    def revenue_by_payment_method(
        self, start: date | None = None, end: date | None = None, **filters
    ) -> List[Dict[str, Any]]:
        rows = self.repo.totals_by_payment_method(start=start, end=end, **filters)
        return [
            {
                "payment_method": r.payment_method,
                "payment_method_label": label_for(PaymentMethod, PAYMENT_METHOD_LABELS, r.payment_method),
                "total_sales": r.total_sales,
                "total_revenue": to_money(r.total_revenue),
            }
            for r in rows
        ]

    def stand_totals(self, stand_id: int) -> Dict[str, Any]:
        return {
            "stand_id": stand_id,
            "total_sales_value": self.total_revenue(stand_id=stand_id),
            "total_commission_value": self.total_commission(stand_id=stand_id),
        }

    def sale_details(self, sale_id: int) -> Dict[str, Any]:
        sale = self.repo.get_sale(sale_id)
        if not sale:
            raise ValueError("Sprzedaz nie istnieje")

        vehicle = self.vehicles.get_vehicle(sale.vehicle_id) if sale.vehicle_id else None
        seller = self.users.get_user(sale.seller_id) if sale.seller_id else None
        stand = self.stands.get_stand(sale.stand_id) if sale.stand_id else None

        vehicle_name = vehicle.full_name if vehicle else VEHICLE_NOT_FOUND
        seller_name = seller.name if seller else SELLER_NOT_FOUND

        return {
            "id": sale.id,
            "vehicle_name": vehicle_name,
            "seller_name": seller_name,
            "stand_name": stand.name if stand else STAND_NOT_FOUND,
            "sale_price": to_money(sale.sale_price),
            "commission_amount": to_money(sale.commission_amount),
            "payment_method_label": sale.payment_method_label,
            "financing_details": self.format_financing_details(sale),
            "profit_margin": self.profit_margin(sale, vehicle),
            "days_since_sale": (self.clock().date() - sale.sale_date).days,
            "summary": f"Venda de {vehicle_name} por €{to_money(sale.sale_price)} - {seller_name}",
        }

    @staticmethod
    def profit_margin(sale: SaleModel, vehicle=None) -> float:
        """Marza w % wzgledem original_price pojazdu (lub ceny sprzedazy gdy brak)."""
        sale_price = Decimal(str(sale.sale_price))
        original = vehicle.original_price if vehicle is not None and vehicle.original_price else None
        original = Decimal(str(original)) if original is not None else sale_price
        if original <= 0:
            return 0.0
        return float((sale_price - original) / original * 100)

    @staticmethod
    def format_financing_details(sale: SaleModel) -> str:
        details = sale.financing_details
        if not details or sale.payment_method != PaymentMethod.FINANCING.value:
            return "N/A"

        parts = []
        if "bank" in details:
            parts.append(f"Banco: {details['bank']}")
        if "term" in details:
            parts.append(f"Prazo: {details['term']} meses")
        if "interest_rate" in details:
            parts.append(f"Taxa: {details['interest_rate']}%")
        return ", ".join(parts)

    #commands
    def register_sale(
        self,
        vehicle_id: int,
        seller_id: int,
        stand_id: int,
        customer_name: str,
        sale_price,
        sale_date: date,
        payment_method: str = PaymentMethod.CASH.value,
        commission_percentage=None,
        **extra,
    ) -> SaleModel:
        PaymentMethod(payment_method)

        if Decimal(str(sale_price)) <= 0:
            raise ValueError("Cena sprzedazy musi byc wieksza niz 0")

        #domyslnie stawka prowizji sprzedawcy
        if commission_percentage is None:
            seller = self.users.get_user(seller_id)
            commission_percentage = seller.commission_rate if seller else 0

        sale = SaleModel(
            vehicle_id=vehicle_id,
            seller_id=seller_id,
            stand_id=stand_id,
            customer_name=customer_name,
            sale_price=Decimal(str(sale_price)),
            commission_percentage=Decimal(str(commission_percentage)),
            commission_amount=self.calculate_commission(sale_price, commission_percentage),
            sale_date=sale_date,
            payment_method=payment_method,
            **extra,
        )
        created = self.repo.create_sale(sale)

        logger.info(f"Zarejestrowano sprzedaz {created.id} pojazdu {vehicle_id} przez sprzedawce {seller_id}")
        return created

    def recompute_commission(self, sale_id: int) -> SaleModel:
        """Jawny zapis commission_amount = sale_price * commission_percentage / 100."""
        sale = self.repo.get_sale(sale_id)
        if not sale:
            raise ValueError("Sprzedaz nie istnieje")

        old_amount = sale.commission_amount
        sale.commission_amount = self.calculate_commission(sale.sale_price, sale.commission_percentage)
        self.repo.commit()

        logger.info(f"Prowizja sprzedazy {sale_id} przeliczona: {old_amount} -> {sale.commission_amount}")
        return sale
