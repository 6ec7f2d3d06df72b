# standhub/data/models/inquiry.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.data.models.mixins import TimestampMixin
from standhub.domain.labels import (
    InquiryStatus,
    InquiryType,
    INQUIRY_STATUS_LABELS,
    INQUIRY_TYPE_LABELS,
    label_for,
)


class InquiryModel(TimestampMixin, Base):
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=True, index=True)
    stand_id = Column(Integer, ForeignKey("stands.id"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=True)
    message = Column(Text, nullable=True)

    inquiry_type = Column(String(30), nullable=False, default=InquiryType.GENERAL.value)
    status = Column(String(20), nullable=False, default=InquiryStatus.NEW.value, index=True)
    assigned_to = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    notes = Column(Text, nullable=True)

    vehicle = relationship("VehicleModel", back_populates="inquiries")
    stand = relationship("StandModel", back_populates="inquiries")
    assignee = relationship("UserModel", back_populates="assigned_inquiries")

    @property
    def status_label(self) -> str:
        return label_for(InquiryStatus, INQUIRY_STATUS_LABELS, self.status)

    @property
    def inquiry_type_label(self) -> str:
        return label_for(InquiryType, INQUIRY_TYPE_LABELS, self.inquiry_type)

    @property
    def is_converted(self) -> bool:
        return self.status == InquiryStatus.CONVERTED.value
