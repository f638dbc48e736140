"""
Employee Listing Query Builder
=============================================================================
CONCEPT: Two statements, one predicate

Paginating needs two reads:

  count_query   SELECT count(employees.id) AS count FROM employees WHERE <p>
  data_query    SELECT id, name, email, sex FROM employees WHERE <p>
                ORDER BY id LIMIT :per_page [OFFSET :offset]

<p> is built once and attached to both, so the page-bounds check done with
the count always agrees with what the data query can return.

Keyword and sex values are bound parameters. LIKE wildcards inside the
keyword are escaped, so "50%" matches the literal text "50%".
=============================================================================
"""

from dataclasses import dataclass

from sqlalchemy import ColumnElement, Select, func, select

from employee_api.db.models import Employee
from employee_api.services.listing_params import ListingParams

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class ListingQueries:
    count_query: Select
    data_query: Select


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters so `value` only matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_filters(params: ListingParams) -> list[ColumnElement[bool]]:
    """WHERE conditions shared by the count and data queries."""
    filters: list[ColumnElement[bool]] = []

    if params.keyword:
        pattern = f"%{escape_like(params.keyword)}%"
        filters.append(Employee.name.ilike(pattern, escape=LIKE_ESCAPE))

    if params.sex:
        filters.append(Employee.sex == params.sex)

    return filters


def build_listing_queries(params: ListingParams) -> ListingQueries:
    """Build the count and data statements for one listing request."""
    filters = build_filters(params)

    count_query = select(func.count(Employee.id).label("count")).select_from(Employee)
    data_query = select(Employee.id, Employee.name, Employee.email, Employee.sex)

    if filters:
        count_query = count_query.where(*filters)
        data_query = data_query.where(*filters)

    data_query = data_query.order_by(Employee.id).limit(params.per_page)
    if params.page > 1:
        data_query = data_query.offset(params.offset)

    return ListingQueries(count_query=count_query, data_query=data_query)
