"""
Employee Listing Service
=============================================================================
CONCEPT: Count, check, then fetch

One listing request runs strictly in this order:

  1. validate      raw query values -> ListingParams     (ValidationError 400)
  2. build         ListingParams -> count + data statements
  3. count         run count_query                       (DatabaseError 500)
                   exactly one row with a finite `count`  (DatabaseError 500)
                   count == 0                             (NotFoundError 404)
                   page > ceil(count / per_page)          (InvalidPageError 400)
  4. fetch         run data_query, LIMIT capped at count  (DatabaseError 500)
  5. assemble      ListingResult(entries, item_count, page)

Step 4 never runs when step 3 failed: the bounds check is what turns an
out-of-range OFFSET into a 400 instead of an empty page.
=============================================================================
"""

import math
from dataclasses import dataclass, field
from typing import Any

from employee_api.core.errors import (
    APIError,
    DatabaseError,
    InvalidPageError,
    NotFoundError,
)
from employee_api.db.accessor import QueryExecutionError, StorageAccessor
from employee_api.observability.logging import get_logger
from employee_api.observability.metrics import record_listing
from employee_api.services.listing_params import validate_listing_params
from employee_api.services.listing_queries import build_listing_queries

logger = get_logger(__name__)


@dataclass
class ListingResult:
    entries: list[dict[str, Any]] = field(default_factory=list)
    item_count: int = 0
    page: int = 1


def highest_valid_page(item_count: int, per_page: int) -> int:
    return math.ceil(item_count / per_page)


def extract_count(rows: list[dict[str, Any]]) -> int:
    """Pull the total out of the count query's rows, or raise DatabaseError."""
    if len(rows) != 1:
        raise DatabaseError(f"Count query returned {len(rows)} rows, expected 1")

    count = rows[0].get("count")
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        raise DatabaseError(f"Count query returned a non-numeric count: {count!r}")
    if not math.isfinite(count):
        raise DatabaseError(f"Count query returned a non-finite count: {count!r}")
    return int(count)


class EmployeeListingService:
    """Runs the paginated employee listing against a StorageAccessor."""

    def __init__(self, accessor: StorageAccessor):
        self.accessor = accessor

    async def list_employees(
        self,
        keyword: Any = None,
        sex: Any = None,
        per_page: Any = None,
        page: Any = None,
    ) -> ListingResult:
        try:
            result = await self._list_employees(keyword, sex, per_page, page)
        except APIError as exc:
            record_listing(type(exc).__name__)
            raise
        record_listing("ok")
        return result

    async def _list_employees(self, keyword, sex, per_page, page) -> ListingResult:
        params = validate_listing_params(
            keyword=keyword, sex=sex, per_page=per_page, page=page
        )
        queries = build_listing_queries(params)
        log = logger.bind(
            keyword=params.keyword,
            sex=params.sex,
            per_page=params.per_page,
            page=params.page,
        )

        try:
            count_rows = await self.accessor.execute(queries.count_query, label="count")
        except QueryExecutionError as exc:
            log.error("count_query_failed", error=str(exc))
            raise DatabaseError(str(exc)) from exc

        item_count = extract_count(count_rows)
        if item_count == 0:
            log.info("employee_listing_empty")
            raise NotFoundError("No employees match the given filters")

        last_page = highest_valid_page(item_count, params.per_page)
        if params.page > last_page:
            log.info("employee_listing_page_out_of_range", highest_valid_page=last_page)
            raise InvalidPageError(params.page, last_page)

        # No page holds more than item_count rows; keeps LIMIT within SQLite INTEGER
        data_query = queries.data_query.limit(min(params.per_page, item_count))

        try:
            entries = await self.accessor.execute(data_query, label="data")
        except QueryExecutionError as exc:
            log.error("data_query_failed", error=str(exc))
            raise DatabaseError(str(exc)) from exc

        log.info("employee_listing_served", item_count=item_count, returned=len(entries))
        return ListingResult(entries=entries, item_count=item_count, page=params.page)
