"""
Health Check Endpoints
=============================================================================
CONCEPT: Health Checks

  1. /health (Liveness): "Is the process running?"
     Always 200 while the process is alive.

  2. /ready (Readiness): "Can it handle requests?"
     Runs SELECT 1 through the storage handle. A failing database reports
     "degraded" instead of taking the liveness probe down with it.

GET / keeps the plain "API is active" banner for quick manual checks, and
GET /metrics serves the Prometheus exposition (employee_api.observability.metrics).
=============================================================================
"""

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text

from employee_api.api.dependencies import get_accessor
from employee_api.db.accessor import QueryExecutionError, StorageAccessor

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    return "API is active"


@router.get("/health")
async def health_check():
    """Liveness probe."""
    return {"status": "ok", "service": "employee-directory-api"}


@router.get("/ready")
async def readiness_check(accessor: StorageAccessor = Depends(get_accessor)):
    """Readiness probe. Checks database connectivity."""
    checks = {}

    try:
        await accessor.execute(text("SELECT 1"), label="readiness")
        checks["database"] = "ok"
    except QueryExecutionError as e:
        checks["database"] = f"error: {e}"

    all_ok = all(v == "ok" for v in checks.values())

    return {
        "status": "ok" if all_ok else "degraded",
        "checks": checks,
    }


@router.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus scrape endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
