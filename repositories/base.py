"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

Repositories stage changes on the session; services decide when to commit so a
multi-row write lands in one transaction.
"""

from typing import Generic, TypeVar, Optional, Type, Any
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common session operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: Any) -> Optional[ModelType]:
        """
        Get entity by primary key.

        Subclasses with ownership rules expose ``get_by_id_and_user`` instead
        and callers in the service layer should prefer that.
        """
        return self.db.get(self.model, entity_id)

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity and flush so generated ids are available"""
        self.db.add(entity)
        self.db.flush()
        return entity

    def delete(self, entity: ModelType) -> None:
        """Stage deletion of an entity"""
        self.db.delete(entity)
        self.db.flush()

    def commit(self) -> None:
        """Commit the current transaction."""
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
