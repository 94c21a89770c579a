from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from claimdesk.models.claim import Claim
from claimdesk.models.return_request import ReturnRequest

ModelT = TypeVar("ModelT", Claim, ReturnRequest)


class CaseRepository(Generic[ModelT]):
    """create / find / update over one case collection.

    Absent records come back as ``None``; nothing here raises for "not found".
    Filters are keyword arguments naming model columns, matched by equality.
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    def _query(self, filters: dict[str, Any]):
        q = self.db.query(self.model)
        for column, value in filters.items():
            q = q.filter(getattr(self.model, column) == value)
        return q

    def create(self, data: dict[str, Any]) -> ModelT:
        record = self.model(**data)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def find_many(self, **filters: Any) -> List[ModelT]:
        return self._query(filters).order_by(self.model.submission_date.asc(), self.model.id.asc()).all()

    def find_unique(self, id: str) -> Optional[ModelT]:
        return self.db.get(self.model, id)

    def find_first(self, **filters: Any) -> Optional[ModelT]:
        return self._query(filters).order_by(self.model.submission_date.asc(), self.model.id.asc()).first()

    def update(self, id: str, data: dict[str, Any]) -> Optional[ModelT]:
        record = self.find_unique(id)
        if record is None:
            return None
        for column, value in data.items():
            setattr(record, column, value)
        self.db.commit()
        self.db.refresh(record)
        return record


def claims(db: Session) -> CaseRepository[Claim]:
    return CaseRepository(db, Claim)


def returns(db: Session) -> CaseRepository[ReturnRequest]:
    return CaseRepository(db, ReturnRequest)
