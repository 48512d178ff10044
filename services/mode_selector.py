"""
Routing between the hosted backend and demo-mode local storage.

The decision is made on every call: an unconfigured backend always routes to
local storage, and a configured backend that fails for any infrastructure
reason is logged and the same operation is re-run locally. Domain errors
(not found, validation, authorization) are raised as-is.
"""

from typing import Callable, Optional, Tuple, Type, TypeVar
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.config import Settings
from domain.enums import StoreMode
from repositories.local_store import LocalMenuStore
from repositories.sql_store import SqlMenuStore
from repositories.store import MenuStore

logger = logging.getLogger("menufy.mode_selector")

T = TypeVar("T")

FALLBACK_ERRORS: Tuple[Type[BaseException], ...] = (SQLAlchemyError, OSError)


class ModeSelector:
    """Run store operations against the backend, or locally when it is unusable"""

    def __init__(
        self,
        settings: Settings,
        local_store: LocalMenuStore,
        session_factory: Optional[sessionmaker] = None,
    ):
        self.settings = settings
        self.local_store = local_store
        self.session_factory = session_factory

    def backend_configured(self) -> bool:
        return self.session_factory is not None and self.settings.backend_configured()

    @property
    def mode(self) -> StoreMode:
        return StoreMode.BACKEND if self.backend_configured() else StoreMode.DEMO

    def run(self, operation: Callable[[MenuStore], T], action: str = "store operation") -> T:
        """Run ``operation`` with the store chosen for this call"""
        if not self.backend_configured():
            logger.debug("Demo mode: %s served from local storage", action)
            return operation(self.local_store)

        session = None
        try:
            session = self.session_factory()
            return operation(SqlMenuStore(session))
        except FALLBACK_ERRORS as exc:
            logger.warning(
                "Backend %s failed, falling back to local storage: %s", action, exc
            )
        finally:
            if session is not None:
                session.close()

        return operation(self.local_store)
