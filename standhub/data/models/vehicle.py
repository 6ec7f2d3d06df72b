# standhub/data/models/vehicle.py
from decimal import Decimal

from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, JSON, ForeignKey
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.data.models.mixins import TimestampMixin, SoftDeleteMixin
from standhub.domain.labels import (
    VehicleStatus,
    FuelType,
    Transmission,
    VEHICLE_STATUS_LABELS,
    FUEL_TYPE_LABELS,
    TRANSMISSION_LABELS,
    label_for,
)

CENT = Decimal("0.01")


class VehicleModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True)
    stand_id = Column(Integer, ForeignKey("stands.id"), nullable=False, index=True)
    reference = Column(String(20), nullable=False, unique=True, index=True)

    brand = Column(String(100), nullable=False, index=True)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    mileage = Column(Integer, nullable=False, default=0)
    fuel_type = Column(String(20), nullable=True)
    transmission = Column(String(20), nullable=True)
    engine_size = Column(Numeric(3, 1), nullable=True)
    power_hp = Column(Integer, nullable=True)
    doors = Column(Integer, nullable=True)
    seats = Column(Integer, nullable=True)
    color = Column(String(50), nullable=True)

    price = Column(Numeric(10, 2), nullable=False)
    original_price = Column(Numeric(10, 2), nullable=True)
    discount_percentage = Column(Numeric(5, 2), nullable=False, default=Decimal("0"))

    description = Column(Text, nullable=True)
    features = Column(JSON, nullable=True)  # lista stringow, traktowana jak zbior
    status = Column(String(20), nullable=False, default=VehicleStatus.AVAILABLE.value, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_new = Column(Boolean, nullable=False, default=False)
    views_count = Column(Integer, nullable=False, default=0)

    stand = relationship("StandModel", back_populates="vehicles")
    images = relationship(
        "VehicleImageModel",
        back_populates="vehicle",
        cascade="all, delete-orphan",
        order_by="VehicleImageModel.order_index",
    )
    favorites = relationship("FavoriteModel", back_populates="vehicle", cascade="all, delete-orphan")
    inquiries = relationship("InquiryModel", back_populates="vehicle")
    sales = relationship("SaleModel", back_populates="vehicle")
    views = relationship("VehicleViewModel", back_populates="vehicle")

    @property
    def full_name(self) -> str:
        return f"{self.brand} {self.model} {self.year}"

    @property
    def has_discount(self) -> bool:
        return (self.discount_percentage or 0) > 0

    @property
    def current_price(self) -> Decimal:
        price = Decimal(self.price)
        if self.has_discount:
            factor = 1 - Decimal(self.discount_percentage) / 100
            return (price * factor).quantize(CENT)
        return price

    @property
    def discount_amount(self) -> Decimal:
        return Decimal(self.price) - self.current_price

    @property
    def status_label(self) -> str:
        return label_for(VehicleStatus, VEHICLE_STATUS_LABELS, self.status)

    @property
    def fuel_type_label(self) -> str:
        return label_for(FuelType, FUEL_TYPE_LABELS, self.fuel_type)

    @property
    def transmission_label(self) -> str:
        return label_for(Transmission, TRANSMISSION_LABELS, self.transmission)

    @property
    def primary_image(self):
        return next((i for i in self.images if i.is_primary), None)

    def has_feature(self, feature: str) -> bool:
        return feature in set(self.features or [])
