"""
Storage Accessor
=============================================================================
CONCEPT: One execution path for every read

All statements against the employee table go through StorageAccessor.execute.
Whatever the driver hands back, callers always receive a list of plain
dicts:

    no rows    -> []
    one row    -> [{"count": 25}]
    many rows  -> [{"id": 1, ...}, {"id": 2, ...}, ...]

Driver failures (including bound values the driver cannot convert, which
it raises as OverflowError) and timeouts surface as QueryExecutionError with
the driver message preserved. Nothing is retried here; the caller decides what a
failure means.
=============================================================================
"""

import asyncio
import time
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql.expression import Executable

from employee_api.observability.logging import get_logger
from employee_api.observability.metrics import record_query

logger = get_logger(__name__)


class QueryExecutionError(Exception):
    """A statement could not be executed against the store."""


class StorageAccessor:
    """Executes read-only statements and normalizes their rows."""

    def __init__(self, engine: AsyncEngine, timeout_seconds: float | None = 5.0):
        self._engine = engine
        self._timeout_seconds = timeout_seconds

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def execute(self, statement: Executable, label: str = "query") -> list[dict[str, Any]]:
        """
        Run `statement` on its own connection and return every row as a dict.

        `label` names the statement in logs and metrics ("count", "data").
        """
        start = time.perf_counter()
        try:
            rows = await asyncio.wait_for(
                self._fetch_all(statement), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError as exc:
            record_query(label, "timeout", time.perf_counter() - start)
            logger.warning("query_timed_out", query=label, timeout=self._timeout_seconds)
            raise QueryExecutionError(
                f"Query timed out after {self._timeout_seconds} seconds"
            ) from exc
        except (SQLAlchemyError, OverflowError) as exc:
            record_query(label, "error", time.perf_counter() - start)
            message = str(getattr(exc, "orig", None) or exc)
            logger.warning("query_failed", query=label, error=message)
            raise QueryExecutionError(message) from exc

        record_query(label, "success", time.perf_counter() - start)
        return rows

    async def _fetch_all(self, statement: Executable) -> list[dict[str, Any]]:
        async with self._engine.connect() as conn:
            result = await conn.execute(statement)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]
