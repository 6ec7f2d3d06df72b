# standhub/data/models/sale.py
from sqlalchemy import Column, Integer, String, Text, Date, Numeric, JSON, ForeignKey
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.data.models.mixins import TimestampMixin
from standhub.domain.labels import PaymentMethod, PAYMENT_METHOD_LABELS, label_for


class SaleModel(TimestampMixin, Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=True, index=True)
    seller_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    stand_id = Column(Integer, ForeignKey("stands.id"), nullable=True, index=True)

    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255), nullable=True)
    customer_phone = Column(String(20), nullable=True)

    sale_price = Column(Numeric(10, 2), nullable=False)
    commission_percentage = Column(Numeric(5, 2), nullable=False, default=0)
    # nie jest przeliczane automatycznie, patrz SalesService.recompute_commission
    commission_amount = Column(Numeric(10, 2), nullable=False, default=0)
    sale_date = Column(Date, nullable=False, index=True)

    payment_method = Column(String(20), nullable=False, default=PaymentMethod.CASH.value)
    financing_details = Column(JSON, nullable=True)
    notes = Column(Text, nullable=True)

    vehicle = relationship("VehicleModel", back_populates="sales")
    seller = relationship("UserModel", back_populates="sales")
    stand = relationship("StandModel", back_populates="sales")

    @property
    def payment_method_label(self) -> str:
        return label_for(PaymentMethod, PAYMENT_METHOD_LABELS, self.payment_method)
