"""
Request Dependencies
=============================================================================
CONCEPT: Dependency Injection from the application context

The lifespan in employee_api.main creates the storage handle and the role
store once and keeps them on `app.state`. Route handlers never import them;
they declare what they need and FastAPI resolves it per request:

    @router.get("/employees")
    async def list_employees(service = Depends(get_listing_service)): ...

In tests the same objects are set on `app.state` directly, or a dependency
is swapped through `app.dependency_overrides`.
=============================================================================
"""

from fastapi import Depends, Request

from employee_api.db.accessor import StorageAccessor
from employee_api.lookup.roles import RoleStore
from employee_api.services.employee_listing import EmployeeListingService


def get_accessor(request: Request) -> StorageAccessor:
    return request.app.state.accessor


def get_listing_service(
    accessor: StorageAccessor = Depends(get_accessor),
) -> EmployeeListingService:
    return EmployeeListingService(accessor)


def get_role_store(request: Request) -> RoleStore:
    return request.app.state.role_store
