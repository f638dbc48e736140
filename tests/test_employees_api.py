"""HTTP tests for GET /api/v1/employees and the shared error shape."""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_api.api.dependencies import get_accessor, get_listing_service
from employee_api.core.errors import DatabaseError
from employee_api.db.accessor import QueryExecutionError

URL = "/api/v1/employees"


@pytest.fixture
async def seeded(populate, make_employees):
    await populate(make_employees(25))


# =============================================================================
# Scenarios
# =============================================================================
async def test_last_page_is_partial(client, seeded):
    response = await client.get(URL, params={"per_page": "10", "page": "3"})

    assert response.status_code == 200
    body = response.json()
    assert len(body["entries"]) == 5
    assert body["item_count"] == 25
    assert body["page"] == 3


async def test_page_past_the_end_is_400(client, seeded):
    response = await client.get(URL, params={"per_page": "10", "page": "4"})

    assert response.status_code == 400
    assert "highest valid page is 3" in response.json()["error"]


async def test_no_match_is_404(client, seeded):
    response = await client.get(URL, params={"keyword": "zzz"})

    assert response.status_code == 404
    assert response.json() == {"error": "No employees match the given filters"}


async def test_non_numeric_per_page_is_400(client, seeded):
    response = await client.get(URL, params={"per_page": "abc"})

    assert response.status_code == 400
    assert response.json() == {"error": "per_page must be of type number"}


async def test_non_numeric_page_is_400(client, seeded):
    response = await client.get(URL, params={"page": "two"})

    assert response.status_code == 400
    assert response.json() == {"error": "page must be of type number"}


async def test_huge_per_page_is_a_single_page(client, seeded):
    response = await client.get(URL, params={"per_page": "1e20"})

    assert response.status_code == 200
    body = response.json()
    assert len(body["entries"]) == 25
    assert body["item_count"] == 25
    assert body["page"] == 1


async def test_mixed_case_sex_is_applied(client, seeded):
    response = await client.get(URL, params={"sex": "Male", "per_page": "50"})

    assert response.status_code == 200
    body = response.json()
    assert body["item_count"] == 12
    assert {entry["sex"] for entry in body["entries"]} == {"male"}


async def test_unrecognized_sex_is_ignored(client, seeded):
    # Documented behavior: unknown values drop the filter rather than fail
    response = await client.get(URL, params={"sex": "robot"})

    assert response.status_code == 200
    assert response.json()["item_count"] == 25


# =============================================================================
# Defaults and shape
# =============================================================================
async def test_defaults(client, seeded):
    response = await client.get(URL)

    body = response.json()
    assert response.status_code == 200
    assert len(body["entries"]) == 10
    assert body["page"] == 1
    assert body["entries"][0] == {
        "id": 1,
        "name": "Person 01",
        "email": "person.01@faux-ltd.com",
        "sex": "female",
    }


async def test_wildcard_keyword_lists_everything(client, seeded):
    response = await client.get(URL, params={"keyword": "*"})
    assert response.json()["item_count"] == 25


async def test_page_below_one_serves_first_page(client, seeded):
    response = await client.get(URL, params={"page": "0"})

    assert response.status_code == 200
    assert response.json()["page"] == 1
    assert response.json()["entries"][0]["id"] == 1


async def test_repeated_request_is_byte_identical(client, seeded):
    params = {"keyword": "person", "sex": "female", "per_page": "4", "page": "2"}

    first = await client.get(URL, params=params)
    second = await client.get(URL, params=params)

    assert first.status_code == 200
    assert first.content == second.content


async def test_response_carries_request_id(client, seeded):
    response = await client.get(URL, headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


# =============================================================================
# Failure paths
# =============================================================================
class FailingDataAccessor:
    def __init__(self):
        self.calls = 0

    async def execute(self, statement, label="query"):
        self.calls += 1
        if label == "count":
            return [{"count": 5}]
        raise QueryExecutionError("disk I/O error at /var/db/employees.db")


async def test_data_query_failure_is_500_without_driver_detail(app, client):
    app.dependency_overrides[get_accessor] = FailingDataAccessor

    response = await client.get(URL)

    assert response.status_code == 500
    assert response.json() == {"error": DatabaseError.PUBLIC_MESSAGE}
    assert "disk I/O" not in response.text


async def test_missing_table_is_500(app, client, engine):
    async with engine.begin() as conn:
        await conn.exec_driver_sql("DROP TABLE employees")

    response = await client.get(URL)

    assert response.status_code == 500
    assert response.json() == {"error": DatabaseError.PUBLIC_MESSAGE}


async def test_unmapped_exception_is_generic_500(app):
    class BrokenService:
        async def list_employees(self, **kwargs):
            raise RuntimeError("boom")

    app.dependency_overrides[get_listing_service] = BrokenService
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get(URL)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert "boom" not in response.text


async def test_unknown_route_uses_error_shape(client):
    response = await client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


async def test_write_methods_are_not_allowed(client):
    response = await client.post(URL, json={"name": "New Person"})

    assert response.status_code == 405
    assert "error" in response.json()
