"""
Base Repository - SQLAlchemy data access shared by every entity

Author: TM3
Date: 2025-11-28
"""
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class SqlAlchemyRepository(Generic[ModelT]):
    """
    Repository for one ORM model

    Writes commit immediately; one repository instance lives for the
    duration of a request session.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def save(self, entity: ModelT) -> ModelT:
        """
        Insert or update an entity

        Returns:
            The persisted entity, refreshed from the database
        """
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """
        Find entity by ID

        Returns:
            Entity or None if not found
        """
        return self.db.get(self.model, entity_id)

    def exists_by_id(self, entity_id: int) -> bool:
        stmt = select(func.count()).select_from(self.model).where(self.model.id == entity_id)
        return self.db.scalar(stmt) > 0

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model))

    def find_all(
        self,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Tuple[List[ModelT], int]:
        """
        Find entities ordered by id

        Args:
            limit: Maximum results to return (None: no limit)
            offset: Number of results to skip

        Returns:
            Tuple of (list of entities, total count)
        """
        stmt = select(self.model).order_by(self.model.id).limit(limit).offset(offset)
        return list(self.db.scalars(stmt)), self.count()

    def delete_by_id(self, entity_id: int) -> bool:
        """
        Delete entity by ID

        Returns:
            True if a row was deleted, False if it did not exist
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False

        self.db.delete(entity)
        self.db.commit()
        return True
