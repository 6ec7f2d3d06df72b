# standhub/data/models/audit_log.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship

from standhub.data.database import Base
from standhub.domain.labels import AuditAction, ACTION_LABELS, label_for, table_name_label


class AuditLogModel(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    action = Column(String(50), nullable=False, index=True)
    table_name = Column(String(100), nullable=False, index=True)
    record_id = Column(Integer, nullable=True)
    old_values = Column(JSON, nullable=True)
    new_values = Column(JSON, nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    user = relationship("UserModel", back_populates="audit_logs")

    @property
    def action_label(self) -> str:
        return label_for(AuditAction, ACTION_LABELS, self.action)

    @property
    def table_name_label(self) -> str:
        return table_name_label(self.table_name)
