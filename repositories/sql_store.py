"""
Hosted backend implementation of the menu storage port.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session

from core.utils.helpers import make_serializable
from domain.enums import StoreMode
from repositories.base import BaseRepository
from repositories.restaurant_repository import (
    RestaurantRepository,
    MenuCategoryRepository,
    MenuItemRepository,
)
from repositories.store import (
    CATEGORIES,
    ITEMS,
    RESTAURANTS,
    MenuStore,
    Record,
    check_collection,
)


def entity_to_record(entity) -> Record:
    """Column values of an ORM entity as a JSON-compatible dict"""
    mapper = sa_inspect(entity).mapper
    return make_serializable(
        {attr.key: getattr(entity, attr.key) for attr in mapper.column_attrs}
    )


class SqlMenuStore(MenuStore):
    """Menu collections backed by SQLAlchemy repositories on one session"""

    mode = StoreMode.BACKEND

    def __init__(self, db: Session):
        self.db = db
        self._repositories: Dict[str, BaseRepository] = {
            RESTAURANTS: RestaurantRepository(db),
            CATEGORIES: MenuCategoryRepository(db),
            ITEMS: MenuItemRepository(db),
        }

    def _repo(self, collection: str) -> BaseRepository:
        return self._repositories[check_collection(collection)]

    def list(self, collection: str, **filters: Any) -> List[Record]:
        return [entity_to_record(e) for e in self._repo(collection).list_by(**filters)]

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        entity = self._repo(collection).get_by_id(record_id)
        return entity_to_record(entity) if entity is not None else None

    def create(self, collection: str, fields: Record) -> Record:
        return entity_to_record(self._repo(collection).create(dict(fields)))

    def update(self, collection: str, record_id: str, fields: Record) -> Optional[Record]:
        entity = self._repo(collection).update(record_id, dict(fields))
        return entity_to_record(entity) if entity is not None else None

    def delete(self, collection: str, record_id: str) -> bool:
        return self._repo(collection).delete(record_id)
