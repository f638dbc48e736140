"""
Database Engine Management
=============================================================================
CONCEPT: Async SQLAlchemy over SQLite

The employee table lives in a SQLite file reached through the aiosqlite
driver, so statements run without blocking the event loop.

  1. Engine: The connection factory. One per application, created in the
     FastAPI lifespan and disposed on shutdown.
  2. Connection: Checked out per statement by the StorageAccessor and
     returned straight away. No request holds a connection across two
     statements.

There is no module-level engine here. The application context owns the
handle (app.state) and hands it to request handlers via dependencies.
Tests build their own in-memory engine the same way.
=============================================================================
"""

from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from employee_api.observability.logging import get_logger

logger = get_logger(__name__)


# Base class for all ORM models
class Base(DeclarativeBase):
    pass


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine used for every read against the employee table."""
    return create_async_engine(database_url, echo=echo)


def sqlite_file_path(database_url: str) -> Path | None:
    """Return the file behind a SQLite URL, or None for memory/other backends."""
    url = make_url(database_url)
    if not url.get_backend_name() == "sqlite":
        return None
    if not url.database or url.database == ":memory:":
        return None
    return Path(url.database)


def reset_database_file(database_url: str) -> bool:
    """
    Delete an existing SQLite database file so startup recreates it.

    Returns True when a file was removed.
    """
    path = sqlite_file_path(database_url)
    if path is None or not path.exists():
        return False
    path.unlink()
    logger.info("database_file_removed", path=str(path))
    return True
