import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InternalError, NotFoundError, ValidationError
from app.db.base import Base, is_valid_id

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Thin wrapper around one collection.

    Every write commits on its own; a multi-step operation is a sequence of
    independent commits, not a single transaction.
    """

    model: Type[ModelT]
    not_found_detail = "Not found"

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(f"Failed to write to {self.model.__tablename__}")
            raise InternalError(f"Failed to write to {self.model.__tablename__}") from exc

    def query(self):
        return self.db.query(self.model)

    def get(self, object_id: str) -> Optional[ModelT]:
        if not is_valid_id(object_id):
            raise ValidationError("Invalid ID format")
        return self.query().filter(self.model.id == object_id).first()

    def get_or_404(self, object_id: str, detail: Optional[str] = None) -> ModelT:
        obj = self.get(object_id)
        if not obj:
            raise NotFoundError(detail or self.not_found_detail)
        return obj

    def list(self) -> List[ModelT]:
        return self.query().all()

    def count(self) -> int:
        return self.query().count()

    def add(self, obj: ModelT) -> ModelT:
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)
        return obj

    def update(self, obj: ModelT, values: Dict[str, Any]) -> ModelT:
        for key, value in values.items():
            setattr(obj, key, value)
        self._commit()
        self.db.refresh(obj)
        return obj

    def patch(self, obj: ModelT, values: Dict[str, Any]) -> ModelT:
        """Apply a partial update; null on a NOT NULL column leaves the stored value as is."""
        required = {column.name for column in self.model.__table__.columns if not column.nullable}
        return self.update(obj, {key: value for key, value in values.items() if value is not None or key not in required})

    def delete(self, obj: ModelT) -> None:
        self.db.delete(obj)
        self._commit()
