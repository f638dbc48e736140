"""
Employee API Endpoints
=============================================================================
CONCEPT: Loose query strings, strict service

GET /api/v1/employees?keyword=&sex=&per_page=&page=

Every query parameter is accepted as a raw string here. Type checking and
defaults live in the service's validator, so a bad `per_page` produces the
same `{"error": ...}` 400 body as every other failure instead of FastAPI's
422 validation payload.

Success:  200 {"entries": [...], "item_count": 25, "page": 3}
Failure:  APIError -> {"error": "<detail>"} with the error's status code
=============================================================================
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from employee_api.api.dependencies import get_listing_service
from employee_api.services.employee_listing import EmployeeListingService

router = APIRouter(prefix="/employees", tags=["Employees"])


# =============================================================================
# Pydantic Schemas
# =============================================================================
class EmployeeResponse(BaseModel):
    id: int
    name: str | None
    email: str | None
    sex: str | None


class EmployeeListResponse(BaseModel):
    """One page of employees plus the filtered total."""

    entries: list[EmployeeResponse]
    item_count: int
    page: int


# =============================================================================
# Endpoints
# =============================================================================
@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    keyword: str | None = Query(None, description="Case-insensitive name substring; '*' means all"),
    sex: str | None = Query(None, description="male or female; other values are ignored"),
    per_page: str | None = Query(None, description="Items per page (default 10)"),
    page: str | None = Query(None, description="Page number, 1-indexed (default 1)"),
    service: EmployeeListingService = Depends(get_listing_service),
):
    """
    List employees one page at a time.

    The count of matching rows is read first; a page past the last one is
    rejected with 400 and an empty match with 404.
    """
    result = await service.list_employees(
        keyword=keyword, sex=sex, per_page=per_page, page=page
    )
    return EmployeeListResponse(
        entries=[EmployeeResponse.model_validate(row) for row in result.entries],
        item_count=result.item_count,
        page=result.page,
    )
