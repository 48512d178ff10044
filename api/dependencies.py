"""
API dependencies for dependency injection
"""

from functools import lru_cache
from typing import Optional

from fastapi import Header

from adapters.local_storage import InMemoryStorage, JsonFileStorage, KeyValueStorage
from app.config import LocalStorageBackend, settings
from app.security import decode_access_token, extract_bearer_token
from domain.models import SessionLocal
from repositories.local_store import LocalMenuStore
from services.cart_service import CartService
from services.mode_selector import ModeSelector


@lru_cache()
def get_local_store() -> LocalMenuStore:
    """Demo-mode store, shared by every request of the process"""
    storage: KeyValueStorage
    if settings.local_storage_backend == LocalStorageBackend.MEMORY:
        storage = InMemoryStorage()
    else:
        storage = JsonFileStorage(settings.local_storage_dir)
    return LocalMenuStore(storage)


def get_mode_selector() -> ModeSelector:
    """
    Store routing dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(selector: ModeSelector = Depends(get_mode_selector)):
            selector.run(lambda store: store.list("restaurants"))
    """
    return ModeSelector(settings, get_local_store(), SessionLocal)


@lru_cache()
def get_cart_service() -> CartService:
    return CartService(
        currency_symbol=settings.currency_symbol, ttl_seconds=settings.cart_ttl_sec
    )


def get_current_user_id(
    authorization: Optional[str] = Header(default=None),
) -> Optional[str]:
    """Caller id from a bearer token, or None for anonymous requests.

    A token that is present but invalid is rejected with 401.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return None
    return decode_access_token(token)
