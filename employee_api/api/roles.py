"""
Role Lookup Endpoints

GET /api/v1/roles                      all roles, optionally ?department=
GET /api/v1/roles/{role_id}            one role, 404 when unknown

Served straight from the in-memory RoleStore loaded at startup.
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from employee_api.api.dependencies import get_role_store
from employee_api.core.errors import NotFoundError
from employee_api.lookup.roles import Role, RoleStore

router = APIRouter(prefix="/roles", tags=["Roles"])


class RoleListResponse(BaseModel):
    roles: list[Role]
    count: int


@router.get("", response_model=RoleListResponse)
async def list_roles(
    department: str | None = Query(None, description="Filter by department (case-insensitive)"),
    store: RoleStore = Depends(get_role_store),
):
    if department and department.strip():
        roles = store.by_department(department)
    else:
        roles = store.all()
    return RoleListResponse(roles=roles, count=len(roles))


@router.get("/{role_id}", response_model=Role)
async def get_role(role_id: int, store: RoleStore = Depends(get_role_store)):
    role = store.get(role_id)
    if role is None:
        raise NotFoundError(f"Role {role_id} not found")
    return role
