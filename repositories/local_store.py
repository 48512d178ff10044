"""
Local persistence for demo mode.

Each collection lives as a JSON array under its own key of a key-value
storage (``menufy_restaurants``, ``menufy_categories``, ``menufy_items``).
Every write rewrites the whole collection.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
import json
import logging
import threading
import time

from adapters.local_storage import KeyValueStorage
from core.utils.helpers import make_serializable
from domain.enums import StoreMode
from repositories.store import (
    CATEGORIES,
    ITEMS,
    RESTAURANTS,
    MenuStore,
    Record,
    check_collection,
)

logger = logging.getLogger("menufy.local_store")

STORAGE_KEYS = {
    RESTAURANTS: "menufy_restaurants",
    CATEGORIES: "menufy_categories",
    ITEMS: "menufy_items",
}

COLLECTION_DEFAULTS: Dict[str, Dict[str, Any]] = {
    RESTAURANTS: {"is_active": True, "color_scheme": "#ea580c"},
    CATEGORIES: {"is_active": True, "display_order": 0},
    ITEMS: {
        "is_available": True,
        "is_veg": False,
        "is_spicy": False,
        "is_featured": False,
        "display_order": 0,
    },
}

PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


class TimeOrderedIdGenerator:
    """Millisecond timestamps as ids, bumped by one on collision.

    Unique and increasing within a process; not globally unique.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class LocalMenuStore(MenuStore):
    """Demo-mode menu collections on a key-value storage"""

    mode = StoreMode.DEMO

    def __init__(
        self,
        storage: KeyValueStorage,
        id_generator: Optional[Callable[[], str]] = None,
        defaults: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        self.storage = storage
        self._next_id = id_generator or TimeOrderedIdGenerator()
        self._defaults = defaults or COLLECTION_DEFAULTS

    # ------------------ Raw collection access ------------------
    def _load(self, collection: str) -> List[Record]:
        key = STORAGE_KEYS[check_collection(collection)]
        try:
            raw = self.storage.get_item(key)
        except OSError as exc:
            logger.warning("Local storage unavailable reading %s: %s", key, exc)
            return []
        except UnicodeDecodeError as exc:
            logger.warning("Undecodable bytes under %s, treating as empty: %s", key, exc)
            return []
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("Corrupt JSON under %s, treating as empty: %s", key, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Expected a JSON array under %s, got %s", key, type(data).__name__)
            return []
        return [r for r in data if isinstance(r, dict)]

    def _save(self, collection: str, records: List[Record]) -> None:
        key = STORAGE_KEYS[check_collection(collection)]
        self.storage.set_item(key, json.dumps(records, ensure_ascii=False))

    # ------------------ MenuStore ------------------
    def list(self, collection: str, **filters: Any) -> List[Record]:
        records = self._load(collection)
        if not filters:
            return records
        return [
            r for r in records if all(r.get(k) == v for k, v in filters.items())
        ]

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        for record in self._load(collection):
            if record.get("id") == record_id:
                return record
        return None

    def create(self, collection: str, fields: Record) -> Record:
        records = self._load(collection)
        now = _timestamp()
        record: Record = dict(self._defaults.get(collection, {}))
        record.update(
            {k: v for k, v in make_serializable(dict(fields)).items() if k not in PROTECTED_FIELDS}
        )
        record["id"] = self._next_id()
        record["created_at"] = now
        record["updated_at"] = now
        records.append(record)
        self._save(collection, records)
        logger.debug("Created %s record %s", collection, record["id"])
        return record

    def update(self, collection: str, record_id: str, fields: Record) -> Optional[Record]:
        records = self._load(collection)
        for record in records:
            if record.get("id") == record_id:
                changes = make_serializable(dict(fields))
                record.update({k: v for k, v in changes.items() if k not in PROTECTED_FIELDS})
                record["updated_at"] = _timestamp()
                self._save(collection, records)
                return record
        return None

    def delete(self, collection: str, record_id: str) -> bool:
        records = self._load(collection)
        remaining = [r for r in records if r.get("id") != record_id]
        if len(remaining) == len(records):
            return False
        self._save(collection, remaining)
        return True
