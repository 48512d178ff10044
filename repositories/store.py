"""
Storage port shared by the hosted backend and demo-mode local storage.

Records are plain dicts with JSON-compatible values, so menu logic produces
the same shapes whichever store served it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from domain.enums import StoreMode

RESTAURANTS = "restaurants"
CATEGORIES = "categories"
ITEMS = "items"

COLLECTIONS = (RESTAURANTS, CATEGORIES, ITEMS)

Record = Dict[str, Any]


class MenuStore(ABC):
    """Named collections of records with equality-filtered listing"""

    mode: StoreMode

    @abstractmethod
    def list(self, collection: str, **filters: Any) -> List[Record]:
        """Records whose fields equal every filter, in insertion order."""

    @abstractmethod
    def get(self, collection: str, record_id: str) -> Optional[Record]:
        """Single record or None."""

    @abstractmethod
    def create(self, collection: str, fields: Record) -> Record:
        """Insert a record and return it with id, timestamps and defaults."""

    @abstractmethod
    def update(self, collection: str, record_id: str, fields: Record) -> Optional[Record]:
        """Merge fields into a record; None when the id is unknown."""

    @abstractmethod
    def delete(self, collection: str, record_id: str) -> bool:
        """Remove one record. Never cascades."""


def check_collection(collection: str) -> str:
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection!r}")
    return collection
