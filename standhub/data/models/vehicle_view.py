# standhub/data/models/vehicle_view.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from standhub.data.database import Base


class VehicleViewModel(Base):
    """Append-only, bez created_at/updated_at - liczy sie tylko viewed_at."""

    __tablename__ = "vehicle_views"

    id = Column(Integer, primary_key=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)
    viewed_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    vehicle = relationship("VehicleModel", back_populates="views")
    user = relationship("UserModel")

    __table_args__ = (
        Index("ix_vehicle_views_vehicle_viewed", "vehicle_id", "viewed_at"),
    )
