# standhub/repos/stand_repo.py
from sqlalchemy import select, exists
from sqlalchemy.orm import Session

from standhub.data.models.stand import StandModel


class StandRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_stand(self, stand_id: int, with_deleted: bool = False) -> StandModel | None:
        stand = self.db.get(StandModel, stand_id)
        if stand is None or (stand.is_deleted and not with_deleted):
            return None
        return stand

    def slug_exists(self, slug: str) -> bool:
        # soft-deleted wiersze nadal trzymaja unikalny slug
        return self.db.execute(select(exists().where(StandModel.slug == slug))).scalar()

    def create_stand(self, stand: StandModel) -> StandModel:
        self.db.add(stand)
        self.db.commit()
        self.db.refresh(stand)
        return stand

    def commit(self):
        self.db.commit()
