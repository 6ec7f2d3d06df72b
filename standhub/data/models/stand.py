# standhub/data/models/stand.py
from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, JSON
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.data.models.mixins import TimestampMixin, SoftDeleteMixin


class StandModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "stands"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)

    address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True, index=True)
    postal_code = Column(String(20), nullable=True)
    phone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)
    logo_url = Column(String(500), nullable=True)

    latitude = Column(Numeric(10, 8), nullable=True)
    longitude = Column(Numeric(11, 8), nullable=True)

    # {"monday": {"open": "09:00", "close": "19:00"}, ...}
    business_hours = Column(JSON, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    vehicles = relationship("VehicleModel", back_populates="stand")
    users = relationship("UserModel", back_populates="stand")
    inquiries = relationship("InquiryModel", back_populates="stand")
    sales = relationship("SaleModel", back_populates="stand")

    @property
    def full_address(self) -> str:
        return f"{self.address or ''}, {self.postal_code or ''} {self.city or ''}"

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinates(self) -> dict:
        return {"lat": self.latitude, "lng": self.longitude}

    def business_hours_for_day(self, day: str) -> dict | None:
        return (self.business_hours or {}).get(day.lower())
