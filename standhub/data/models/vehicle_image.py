# standhub/data/models/vehicle_image.py
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.data.models.mixins import TimestampMixin

_SIZE_UNITS = ("B", "KB", "MB", "GB")


class VehicleImageModel(TimestampMixin, Base):
    __tablename__ = "vehicle_images"

    id = Column(Integer, primary_key=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)

    url = Column(String(500), nullable=False)
    alt_text = Column(String(255), nullable=True)
    is_primary = Column(Boolean, nullable=False, default=False)
    order_index = Column(Integer, nullable=False, default=0)

    file_size = Column(Integer, nullable=True)
    width = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)

    vehicle = relationship("VehicleModel", back_populates="images")

    @property
    def formatted_file_size(self) -> str:
        if not self.file_size:
            return "N/A"

        size = float(self.file_size)
        unit = 0
        while size >= 1024 and unit < len(_SIZE_UNITS) - 1:
            size /= 1024
            unit += 1

        return f"{round(size, 2):g} {_SIZE_UNITS[unit]}"

    @property
    def aspect_ratio(self) -> float | None:
        if not self.width or not self.height:
            return None
        return self.width / self.height
