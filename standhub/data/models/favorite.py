# standhub/data/models/favorite.py
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.data.models.mixins import TimestampMixin


class FavoriteModel(TimestampMixin, Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship("UserModel", back_populates="favorites")
    vehicle = relationship("VehicleModel", back_populates="favorites")

    __table_args__ = (UniqueConstraint("user_id", "vehicle_id", name="u_favorite_user_vehicle"),)
