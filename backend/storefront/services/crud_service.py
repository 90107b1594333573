"""
CRUD Service - use-case layer shared by every entity

Maps between DTOs and ORM entities, applies partial updates and keeps
the entity cache consistent with the database.

Author: TM3
Date: 2025-11-28
"""
import logging
from typing import List, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from storefront.core.cache import EntityCache, entity_cache
from storefront.core.merge import merge_partial
from storefront.domain.base import EntityDTO
from storefront.repositories.base import SqlAlchemyRepository

logger = logging.getLogger(__name__)


class CrudService:
    """
    Service for one entity

    Subclasses set the entity name, repository and DTO class.
    Single-record results are loaded eagerly when ``eager_find_one`` is set.

    ``dependent_entities`` names the entities whose cached records embed or
    cascade from this one; every write drops them from the cache.
    """

    entity_name: str
    repository_cls: Type[SqlAlchemyRepository]
    dto_cls: Type[EntityDTO]
    eager_find_one: bool = False
    dependent_entities: Tuple[str, ...] = ()

    def __init__(self, db: Session, cache: Optional[EntityCache] = None):
        self.repository = self.repository_cls(db)
        self.cache = cache if cache is not None else entity_cache

    def _to_dto(self, entity, eager: bool = False) -> EntityDTO:
        return self.dto_cls.from_entity(entity, eager=eager)

    def _evict(self, entity_id: Optional[int]) -> None:
        self.cache.evict(self.entity_name, entity_id)
        for name in self.dependent_entities:
            self.cache.evict_entity(name)

    def _load_one(self, entity_id: int):
        if self.eager_find_one:
            return self.repository.find_one_with_eager_relationships(entity_id)
        return self.repository.find_by_id(entity_id)

    def save(self, dto: EntityDTO) -> EntityDTO:
        """
        Save a new record

        Returns:
            DTO of the persisted record (with its generated id)
        """
        logger.debug(f"Request to save {self.entity_name} : {dto}")
        entity = dto.to_entity(self.repository.model)
        entity = self.repository.save(entity)
        self._evict(entity.id)
        return self._to_dto(entity, eager=self.eager_find_one)

    def update(self, dto: EntityDTO) -> Optional[EntityDTO]:
        """
        Replace every writable field of an existing record

        Returns:
            DTO of the persisted record, or None if it does not exist
        """
        logger.debug(f"Request to update {self.entity_name} : {dto}")
        entity = self.repository.find_by_id(dto.id)
        if entity is None:
            return None

        dto.apply_to(entity)
        entity = self.repository.save(entity)
        self._evict(dto.id)
        return self._to_dto(entity, eager=self.eager_find_one)

    def partial_update(self, patch: BaseModel) -> Optional[EntityDTO]:
        """
        Apply the non-null fields of ``patch`` to an existing record

        Returns:
            DTO of the persisted record, or None if it does not exist
        """
        logger.debug(f"Request to partially update {self.entity_name} : {patch}")
        existing = self.repository.find_by_id(patch.id)
        if existing is None:
            return None

        merge_partial(existing, patch)
        entity = self.repository.save(existing)
        self._evict(patch.id)
        return self._to_dto(entity, eager=self.eager_find_one)

    def find_all(
        self,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Tuple[List[EntityDTO], int]:
        """
        Get records ordered by id

        Returns:
            Tuple of (list of DTOs, total count)
        """
        logger.debug(f"Request to get all {self.entity_name}")
        entities, total = self.repository.find_all(limit=limit, offset=offset)
        return [self._to_dto(entity) for entity in entities], total

    def find_one(self, entity_id: int) -> Optional[EntityDTO]:
        """
        Get one record, from the cache when possible

        Returns:
            DTO or None if not found
        """
        logger.debug(f"Request to get {self.entity_name} : {entity_id}")
        cached = self.cache.get(self.entity_name, entity_id)
        if cached is not None:
            return cached.model_copy(deep=True)

        entity = self._load_one(entity_id)
        if entity is None:
            return None

        dto = self._to_dto(entity, eager=self.eager_find_one)
        self.cache.put(self.entity_name, entity_id, dto.model_copy(deep=True))
        return dto

    def exists(self, entity_id: int) -> bool:
        return self.repository.exists_by_id(entity_id)

    def delete(self, entity_id: int) -> None:
        logger.debug(f"Request to delete {self.entity_name} : {entity_id}")
        self.repository.delete_by_id(entity_id)
        self._evict(entity_id)


class EagerLoadingCrudService(CrudService):
    """CRUD service whose repository can load relationships eagerly"""

    eager_find_one = True

    def find_all_with_eager_relationships(
        self,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Tuple[List[EntityDTO], int]:
        """Same as find_all, with relationship views filled in"""
        logger.debug(f"Request to get all {self.entity_name} with eager relationships")
        entities, total = self.repository.find_all_with_eager_relationships(limit=limit, offset=offset)
        return [self._to_dto(entity, eager=True) for entity in entities], total
