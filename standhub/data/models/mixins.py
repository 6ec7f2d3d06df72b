# standhub/data/models/mixins.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime


def _utcnow():
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


class SoftDeleteMixin:
    """Wiersz oznaczony deleted_at jest pomijany w domyslnych zapytaniach repo."""

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self, when: datetime | None = None):
        self.deleted_at = when or _utcnow()

    def restore(self):
        self.deleted_at = None
