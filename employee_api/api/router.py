"""
API Router Aggregator
=============================================================================
  - health.py    -> /, /health, /ready, /metrics  (unversioned)
  - employees.py -> /api/v1/employees
  - roles.py     -> /api/v1/roles, /api/v1/roles/{role_id}
=============================================================================
"""

from fastapi import APIRouter

from employee_api.api.employees import router as employees_router
from employee_api.api.health import router as health_router
from employee_api.api.roles import router as roles_router

API_V1_PREFIX = "/api/v1"

# Versioned resources
v1_router = APIRouter(prefix=API_V1_PREFIX)
v1_router.include_router(employees_router)
v1_router.include_router(roles_router)

# Main API router, aggregates all sub-routers
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)
