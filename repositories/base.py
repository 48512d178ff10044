"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Any, Dict, Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def list_by(self, **filters: Any) -> List[ModelType]:
        """Entities matching all equality filters, oldest first"""
        query = self.db.query(self.model)
        if filters:
            query = query.filter_by(**filters)
        return query.order_by(self.model.created_at, self.model.id).all()

    def create(self, fields: Dict[str, Any]) -> ModelType:
        """Create new entity"""
        entity = self.model(**fields)
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity_id: str, fields: Dict[str, Any]) -> Optional[ModelType]:
        """Apply field changes to an existing entity"""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return None
        for key, value in fields.items():
            setattr(entity, key, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: str) -> bool:
        """Delete entity by ID"""
        entity = self.get_by_id(entity_id)
        if entity:
            self.db.delete(entity)
            self.db.commit()
            return True
        return False
