#!/usr/bin/env python3
"""
Create the hosted backend tables (restaurants, menu_categories, menu_items).
Does nothing in demo mode, where data lives in local storage.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models.database import engine, init_database

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("menufy.init_db")


def main() -> int:
    if engine is None:
        logger.info("DATABASE_URL is not set; demo mode needs no schema")
        return 0
    try:
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info("Tables present: %s", ", ".join(sorted(tables)))
        return 0
    except SQLAlchemyError as exc:
        logger.error("Failed to initialize the backend: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
