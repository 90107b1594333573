"""
Base class for entity DTOs

Mapping between ORM entities and API schemas lives here instead of in a
separate mapper layer: a DTO knows how to read itself from an entity and
how to write its fields back.
"""
from decimal import Decimal
from typing import Any, ClassVar, List, Tuple

from pydantic import BaseModel, ConfigDict


class EntityDTO(BaseModel):
    """
    Common behaviour for the API representation of a stored record

    Subclasses declare ``id`` plus their own fields. Fields listed in
    ``relationship_fields`` are read-only views filled in on eager loads.
    """

    relationship_fields: ClassVar[Tuple[str, ...]] = ()

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def writable_fields(cls) -> List[str]:
        """Fields copied to the entity on save/update (id excluded)"""
        return [
            name for name in cls.model_fields
            if name != "id" and name not in cls.relationship_fields
        ]

    @classmethod
    def from_entity(cls, entity: Any, eager: bool = False):
        """Build the DTO from an ORM entity; relationship views only if eager"""
        data = {"id": entity.id}
        for name in cls.writable_fields():
            data[name] = getattr(entity, name)
        if eager:
            data.update(cls.load_relationships(entity))
        return cls(**data)

    @classmethod
    def load_relationships(cls, entity: Any) -> dict:
        return {}

    def to_entity(self, entity_cls):
        """New ORM entity carrying this DTO's writable fields"""
        return self.apply_to(entity_cls())

    def apply_to(self, entity: Any):
        """Overwrite every writable field of ``entity`` (None included)"""
        for name in self.writable_fields():
            setattr(entity, name, getattr(self, name))
        return entity

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        return _decimals_to_float(data)


def _decimals_to_float(value):
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: _decimals_to_float(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_decimals_to_float(v) for v in value]
    return value
