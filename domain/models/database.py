"""
Database configuration and session management.

The hosted backend is optional: with no usable ``database_url`` the engine and
session factory stay ``None`` and every store call is served from local
storage instead.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("menufy.database")

# Create SQLAlchemy Base
Base = declarative_base()


def build_engine(url: str, echo: bool = False, **kwargs):
    """Create an engine for ``url``"""
    return create_engine(url, echo=echo, future=True, **kwargs)


# Create engine only when a backend is configured
engine = (
    build_engine(settings.database_url, echo=settings.db_echo)
    if settings.backend_configured()
    else None
)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True) if engine is not None else None


def init_database():
    """Initialize database schema"""
    if engine is None:
        logger.info("No hosted backend configured; running in demo mode")
        return
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

