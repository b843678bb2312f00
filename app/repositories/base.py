"""Generic CRUD repository."""
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """
    Create/read/update/delete operations for one mapped class keyed by
    an integer primary key.

    Subclasses only set ``model``. Each write commits immediately.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def save(self, entity: ModelT) -> ModelT:
        """Insert the entity if it has no id yet, otherwise update it."""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Return the entity, or None if no row has this id."""
        return self.db.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        return list(self.db.scalars(select(self.model).order_by(self.model.id)))

    def exists_by_id(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model))

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.commit()

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete the entity with this id. Returns False if there was none."""
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.delete(entity)
        return True
