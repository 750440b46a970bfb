# backend/utils/record_store.py
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from models.sale import Sale
from models.purchase import Purchase
from models.seller import Seller
from utils.errors import StoreError

logger = logging.getLogger(__name__)

# Record kinds the store knows about
KINDS = {
    "product": Product,
    "sale": Sale,
    "purchase": Purchase,
    "seller": Seller,
}

# "name" -> ascending, "-name" -> descending
OrderBy = Optional[Union[str, Sequence[str]]]


def _model(kind: str):
    try:
        return KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown record kind: {kind}")


def _order_clauses(model, order_by: OrderBy) -> list:
    if not order_by:
        return []
    if isinstance(order_by, str):
        order_by = [order_by]
    clauses = []
    for key in order_by:
        desc = key.startswith("-")
        col = getattr(model, key.lstrip("-"))
        clauses.append(col.desc() if desc else col.asc())
    return clauses


class RecordStore:
    """Thin create/read/update/delete/query facade over a SQLAlchemy session.

    Each mutating call commits on its own, so a sequence of calls is not a
    transaction. Any database failure is rolled back and re-raised as
    StoreError; nothing is retried.
    """

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, kind: str, exc: Exception, step: Optional[str] = None):
        self.db.rollback()
        logger.error("Record store %s on %s failed: %s", action, kind, exc)
        raise StoreError(f"Could not {action} {kind}", step=step) from exc

    def create(self, kind: str, fields: Dict[str, Any], step: Optional[str] = None):
        model = _model(kind)
        try:
            record = model(**fields)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self._fail("create", kind, exc, step)
        return record

    def get_by_id(self, kind: str, record_id: int):
        model = _model(kind)
        try:
            return self.db.get(model, record_id)
        except SQLAlchemyError as exc:
            self._fail("read", kind, exc)

    def get_all(self, kind: str, order_by: OrderBy = None) -> List[Any]:
        return self.query(kind, None, order_by)

    def update(self, kind: str, record_id: int, fields: Dict[str, Any], step: Optional[str] = None):
        model = _model(kind)
        try:
            record = self.db.get(model, record_id)
            if record is None:
                raise StoreError(f"{kind} {record_id} no longer exists", step=step)
            for key, value in fields.items():
                setattr(record, key, value)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self._fail("update", kind, exc, step)
        return record

    def delete(self, kind: str, record_id: int, step: Optional[str] = None) -> None:
        model = _model(kind)
        try:
            record = self.db.get(model, record_id)
            if record is not None:
                self.db.delete(record)
                self.db.commit()
        except SQLAlchemyError as exc:
            self._fail("delete", kind, exc, step)

    def query(self, kind: str, filters: Optional[list] = None, order_by: OrderBy = None) -> List[Any]:
        """Return records of ``kind`` matching every SQLAlchemy criterion in ``filters``."""
        model = _model(kind)
        try:
            q = self.db.query(model)
            for criterion in filters or []:
                q = q.filter(criterion)
            for clause in _order_clauses(model, order_by):
                q = q.order_by(clause)
            return q.all()
        except SQLAlchemyError as exc:
            self._fail("query", kind, exc)


# FastAPI dependency
def get_store(db: Session = Depends(get_db)) -> RecordStore:
    return RecordStore(db)
