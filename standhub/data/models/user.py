# standhub/data/models/user.py
from decimal import Decimal

from sqlalchemy import Column, Integer, String, Boolean, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.data.models.mixins import TimestampMixin, SoftDeleteMixin
from standhub.domain.labels import UserRole, ROLE_LABELS, label_for


class UserModel(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    role = Column(String(20), nullable=False, default=UserRole.VIEWER.value, index=True)
    phone = Column(String(20), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    stand_id = Column(Integer, ForeignKey("stands.id", ondelete="SET NULL"), nullable=True, index=True)
    commission_rate = Column(Numeric(5, 2), nullable=False, default=Decimal("0"))
    is_active = Column(Boolean, nullable=False, default=True)
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    stand = relationship("StandModel", back_populates="users")
    sales = relationship("SaleModel", back_populates="seller")
    assigned_inquiries = relationship("InquiryModel", back_populates="assignee")
    favorites = relationship("FavoriteModel", back_populates="user", cascade="all, delete-orphan")
    audit_logs = relationship("AuditLogModel", back_populates="user")

    @property
    def role_label(self) -> str:
        return label_for(UserRole, ROLE_LABELS, self.role)
