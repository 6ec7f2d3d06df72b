# standhub/services/audit_service.py
from datetime import timedelta
from typing import Dict, Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from standhub.data.models.audit_log import AuditLogModel
from standhub.domain.labels import AuditAction, table_name_label
from standhub.repos.audit_repo import AuditLogRepo
from standhub.repos.user_repo import UserRepo
from standhub.utils.clock import Clock, utcnow, to_date
from standhub.utils.settings import DEFAULT_REPORT_LIMIT, DEFAULT_TREND_DAYS
from standhub.utils.logging import get_logger

logger = get_logger(__name__)

ANONYMOUS_USER = "Utilizador Anónimo"


def changed_fields(old_values: dict | None, new_values: dict | None) -> Dict[str, Dict[str, Any]]:
    """
    Pola z new_values, ktorych wartosc rozni sie od old_values.
    Brak klucza w old_values = None. Porownanie przez ==, nie identycznosc.
    """
    old_values = old_values or {}
    changes = {}
    for field, new in (new_values or {}).items():
        old = old_values.get(field)
        if old != new:
            changes[field] = {"old": old, "new": new}
    return changes


def _display(value) -> str:
    return "" if value is None else str(value)


def changes_summary(log: AuditLogModel) -> str:
    if log.action == AuditAction.CREATE.value:
        return "Criado novo registo"

    if log.action == AuditAction.DELETE.value:
        return "Registo eliminado"

    if log.action == AuditAction.UPDATE.value and log.old_values and log.new_values:
        return ", ".join(
            f"{field}: {_display(diff['old'])} → {_display(diff['new'])}"
            for field, diff in changed_fields(log.old_values, log.new_values).items()
        )

    return "Ação realizada"


class AuditService:
    """
    Log audytowy - tylko insert, nigdy update.
    Raporty: grupuj, policz, posortuj (count malejaco, klucz rosnaco), utnij do limit.
    """

    def __init__(self, db: Session, clock: Clock = utcnow):
        self.repo = AuditLogRepo(db)
        self.users = UserRepo(db)
        self.db = db
        self.clock = clock

    #commands
    def record_action(
        self,
        user_id: int | None,
        action: str,
        table_name: str,
        record_id: int | None = None,
        old_values: dict | None = None,
        new_values: dict | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> bool:
        log = AuditLogModel(
            user_id=user_id,
            action=action,
            table_name=table_name,
            record_id=record_id,
            old_values=old_values,
            new_values=new_values,
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=self.clock(),
        )
        try:
            self.repo.add_log(log)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Blad zapisu logu audytu {action} na {table_name}: {e}")
            return False

        return True

    #query
    def log_details(self, log_id: int) -> Dict[str, Any]:
        log = self.repo.get_log(log_id)
        if not log:
            raise ValueError("Wpis audytu nie istnieje")

        user = self.users.get_user(log.user_id) if log.user_id else None
        changes = changed_fields(log.old_values, log.new_values) if log.old_values and log.new_values else {}

        return {
            "id": log.id,
            "user_name": user.name if user else ANONYMOUS_USER,
            "action_label": log.action_label,
            "table_name_label": log.table_name_label,
            "changed_fields": changes,
            "changed_fields_count": len(changes),
            "changes_summary": changes_summary(log),
        }

    def user_actions_count(self, user_id: int) -> int:
        return self.repo.count_by_user(user_id)

    def most_active_users(self, limit: int = DEFAULT_REPORT_LIMIT, start=None, end=None) -> List[Dict[str, Any]]:
        rows = self.repo.top_counts(AuditLogModel.user_id, limit, start, end)
        users = self.users.get_users(r.user_id for r in rows)

        return [
            {
                "user_id": r.user_id,
                "user_name": users[r.user_id].name if r.user_id in users else ANONYMOUS_USER,
                "actions_count": r.count,
            }
            for r in rows
        ]

    def most_common_actions(self, limit: int = DEFAULT_REPORT_LIMIT, start=None, end=None) -> List[Dict[str, Any]]:
        rows = self.repo.top_counts(AuditLogModel.action, limit, start, end)
        return [{"label": r.action, "count": r.count} for r in rows]

    def most_affected_tables(self, limit: int = DEFAULT_REPORT_LIMIT, start=None, end=None) -> List[Dict[str, Any]]:
        rows = self.repo.top_counts(AuditLogModel.table_name, limit, start, end)
        return [
            {"label": r.table_name, "table_name_label": table_name_label(r.table_name), "count": r.count}
            for r in rows
        ]

    def activity_trend(self, days: int = DEFAULT_TREND_DAYS) -> List[Dict[str, Any]]:
        since = self.clock() - timedelta(days=days)
        return [{"date": to_date(r.day), "count": r.actions_count} for r in self.repo.daily_counts(since)]

    def actions_by_hour(self, start=None, end=None) -> List[Dict[str, Any]]:
        """Kubelki 0-23, tylko godziny z co najmniej jedna akcja."""
        return [
            {"bucket": int(r.hour), "actions_count": r.actions_count}
            for r in self.repo.counts_by_hour(start, end)
        ]

    def actions_by_day_of_week(self, start=None, end=None) -> List[Dict[str, Any]]:
        """Kubelki 1-7, 1 = niedziela, 7 = sobota."""
        return [
            {"bucket": int(r.dow) + 1, "actions_count": r.actions_count}
            for r in self.repo.counts_by_weekday(start, end)
        ]
