# standhub/repos/inquiry_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from standhub.data.models.inquiry import InquiryModel
from standhub.domain.labels import InquiryStatus


class InquiryRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_inquiry(self, inquiry_id: int) -> InquiryModel | None:
        return self.db.get(InquiryModel, inquiry_id)

    def create_inquiry(self, inquiry: InquiryModel) -> InquiryModel:
        self.db.add(inquiry)
        self.db.commit()
        self.db.refresh(inquiry)
        return inquiry

    def list_open(self, stand_id: int | None = None, created_before=None) -> list[InquiryModel]:
        stmt = select(InquiryModel).where(InquiryModel.status != InquiryStatus.CONVERTED.value)
        if stand_id is not None:
            stmt = stmt.where(InquiryModel.stand_id == stand_id)
        if created_before is not None:
            stmt = stmt.where(InquiryModel.created_at < created_before)
        return list(self.db.execute(stmt.order_by(InquiryModel.created_at)).scalars())

    def commit(self):
        self.db.commit()
