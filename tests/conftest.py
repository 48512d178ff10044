"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and that the
application starts in demo mode with in-memory storage.
"""

import os
import sys
from pathlib import Path

# Demo mode, nothing written to disk
os.environ["DATABASE_URL"] = ""
os.environ["DEMO_MODE"] = "false"
os.environ["LOCAL_STORAGE_BACKEND"] = "memory"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from adapters.local_storage import InMemoryStorage
from api.dependencies import get_cart_service, get_mode_selector
from app.config import settings
from domain.models import Base
from main import app
from repositories.local_store import LocalMenuStore
from services.cart_service import CartService
from services.mode_selector import ModeSelector

from test_fixtures import backend_settings, client


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def local_store(storage):
    return LocalMenuStore(storage)


@pytest.fixture
def demo_selector(local_store):
    """Selector with no backend: every call goes to local storage"""
    return ModeSelector(settings, local_store, session_factory=None)


@pytest.fixture
def sqlite_session_factory():
    """In-memory SQLite standing in for the hosted backend"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield sessionmaker(bind=engine)
    finally:
        engine.dispose()


@pytest.fixture
def backend_selector(local_store, sqlite_session_factory):
    return ModeSelector(backend_settings(), local_store, sqlite_session_factory)


@pytest.fixture
def demo_client(demo_selector):
    """API client wired to a fresh demo-mode store and cart registry"""
    cart_service = CartService()
    app.dependency_overrides[get_mode_selector] = lambda: demo_selector
    app.dependency_overrides[get_cart_service] = lambda: cart_service
    try:
        yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def backend_client(backend_selector):
    """API client wired to the SQLite backend"""
    app.dependency_overrides[get_mode_selector] = lambda: backend_selector
    try:
        yield client
    finally:
        app.dependency_overrides.clear()
