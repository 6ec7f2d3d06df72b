# standhub/repos/audit_repo.py
from sqlalchemy import select, func, extract
from sqlalchemy.orm import Session

from standhub.data.models.audit_log import AuditLogModel
from standhub.repos.filters import datetime_window


class AuditLogRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_log(self, log: AuditLogModel) -> AuditLogModel:
        self.db.add(log)
        self.db.commit()
        self.db.refresh(log)
        return log

    def get_log(self, log_id: int) -> AuditLogModel | None:
        return self.db.get(AuditLogModel, log_id)

    def count_by_user(self, user_id: int) -> int:
        stmt = select(func.count(AuditLogModel.id)).where(AuditLogModel.user_id == user_id)
        return self.db.execute(stmt).scalar() or 0

    def top_counts(self, column, limit: int, start=None, end=None):
        """GROUP BY column, COUNT(*), count malejaco, potem wartosc rosnaco, NULL na koncu."""
        count = func.count(AuditLogModel.id).label("count")
        stmt = select(column, count).group_by(column)
        stmt = datetime_window(stmt, AuditLogModel.created_at, start, end)
        stmt = stmt.order_by(count.desc(), column.asc().nulls_last()).limit(limit)
        return self.db.execute(stmt).all()

    def daily_counts(self, since):
        day = func.date(AuditLogModel.created_at).label("day")
        stmt = (
            select(day, func.count(AuditLogModel.id).label("actions_count"))
            .where(AuditLogModel.created_at >= since)
            .group_by(day)
            .order_by(day)
        )
        return self.db.execute(stmt).all()

    def counts_by_hour(self, start=None, end=None):
        hour = extract("hour", AuditLogModel.created_at).label("hour")
        stmt = select(hour, func.count(AuditLogModel.id).label("actions_count")).group_by(hour)
        stmt = datetime_window(stmt, AuditLogModel.created_at, start, end)
        return self.db.execute(stmt.order_by(hour)).all()

    def counts_by_weekday(self, start=None, end=None):
        # dow: 0 = niedziela (postgres i sqlite)
        dow = extract("dow", AuditLogModel.created_at).label("dow")
        stmt = select(dow, func.count(AuditLogModel.id).label("actions_count")).group_by(dow)
        stmt = datetime_window(stmt, AuditLogModel.created_at, start, end)
        return self.db.execute(stmt.order_by(dow)).all()
