# standhub/services/inquiry_service.py
from datetime import timedelta
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from standhub.data.models.inquiry import InquiryModel
from standhub.domain.labels import InquiryStatus, InquiryType
from standhub.repos.inquiry_repo import InquiryRepo
from standhub.repos.stand_repo import StandRepo
from standhub.repos.user_repo import UserRepo
from standhub.utils.clock import Clock, utcnow, as_utc
from standhub.utils.settings import INQUIRY_OVERDUE_DAYS
from standhub.utils.logging import get_logger

logger = get_logger(__name__)

# (maks. liczba godzin od utworzenia, priorytet)
PRIORITY_BANDS = (
    (1, "Alta"),
    (4, "Média"),
    (24, "Baixa"),
)
LOWEST_PRIORITY = "Muito Baixa"


class InquiryService:
    def __init__(self, db: Session, clock: Clock = utcnow):
        self.repo = InquiryRepo(db)
        self.stands = StandRepo(db)
        self.users = UserRepo(db)
        self.clock = clock

    def _get(self, inquiry_id: int) -> InquiryModel:
        inquiry = self.repo.get_inquiry(inquiry_id)
        if not inquiry:
            raise ValueError("Zapytanie nie istnieje")
        return inquiry

    def _age(self, inquiry: InquiryModel) -> timedelta:
        return self.clock() - as_utc(inquiry.created_at)

    #query
    def priority(self, inquiry: InquiryModel) -> str:
        hours = int(self._age(inquiry).total_seconds() // 3600)
        for max_hours, label in PRIORITY_BANDS:
            if hours <= max_hours:
                return label
        return LOWEST_PRIORITY

    def is_urgent(self, inquiry: InquiryModel) -> bool:
        return self.priority(inquiry) == PRIORITY_BANDS[0][1]

    def days_since_creation(self, inquiry: InquiryModel) -> int:
        return self._age(inquiry).days

    def is_overdue(self, inquiry: InquiryModel) -> bool:
        return self.days_since_creation(inquiry) > INQUIRY_OVERDUE_DAYS and not inquiry.is_converted

    def overdue_inquiries(self, stand_id: int | None = None) -> List[InquiryModel]:
        cutoff = self.clock() - timedelta(days=INQUIRY_OVERDUE_DAYS)
        return [i for i in self.repo.list_open(stand_id, created_before=cutoff) if self.is_overdue(i)]

    def summary(self, inquiry_id: int) -> Dict[str, Any]:
        inquiry = self._get(inquiry_id)

        text = f"Inquérito de {inquiry.name}"
        if inquiry.vehicle is not None:
            text += f" sobre {inquiry.vehicle.full_name}"
        text += f" ({inquiry.inquiry_type_label})"

        return {
            "id": inquiry.id,
            "summary": text,
            "status_label": inquiry.status_label,
            "priority": self.priority(inquiry),
            "days_since_creation": self.days_since_creation(inquiry),
            "is_overdue": self.is_overdue(inquiry),
            "stand_name": inquiry.stand.name if inquiry.stand is not None else "N/A",
            "assigned_user_name": inquiry.assignee.name if inquiry.assignee is not None else None,
        }

    #commands
    def create_inquiry(
        self,
        stand_id: int,
        name: str,
        email: str,
        inquiry_type: str = InquiryType.GENERAL.value,
        vehicle_id: int | None = None,
        **fields,
    ) -> InquiryModel:
        InquiryType(inquiry_type)
        if not self.stands.get_stand(stand_id):
            raise ValueError("Stoisko nie istnieje")
        inquiry = InquiryModel(
            stand_id=stand_id,
            vehicle_id=vehicle_id,
            name=name,
            email=email,
            inquiry_type=inquiry_type,
            status=InquiryStatus.NEW.value,
            created_at=self.clock(),
            **fields,
        )
        created = self.repo.create_inquiry(inquiry)
        logger.info(f"Nowe zapytanie {created.id} dla stoiska {stand_id}")
        return created

    def update_status(self, inquiry_id: int, status: str) -> InquiryModel:
        InquiryStatus(status)
        inquiry = self._get(inquiry_id)
        inquiry.status = status
        self.repo.commit()
        logger.info(f"Zapytanie {inquiry_id} -> {status}")
        return inquiry

    def assign_to(self, inquiry_id: int, user_id: int) -> InquiryModel:
        if not self.users.get_user(user_id):
            raise ValueError("Uzytkownik nie istnieje")
        inquiry = self._get(inquiry_id)
        inquiry.assigned_to = user_id
        self.repo.commit()
        return inquiry

    def unassign(self, inquiry_id: int) -> InquiryModel:
        inquiry = self._get(inquiry_id)
        inquiry.assigned_to = None
        self.repo.commit()
        return inquiry

    def add_notes(self, inquiry_id: int, notes: str) -> InquiryModel:
        inquiry = self._get(inquiry_id)
        inquiry.notes = f"{inquiry.notes}\n\n{notes}" if inquiry.notes else notes
        self.repo.commit()
        return inquiry
