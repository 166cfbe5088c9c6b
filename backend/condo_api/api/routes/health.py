"""Health Check: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 while the process is up
    - Never gated by the API key
"""

from fastapi import APIRouter, Depends, status

from condo_api import __version__
from condo_api.api.dependencies import get_store
from condo_api.core.entity_store import EntityStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
def health_check(store: EntityStore = Depends(get_store)):
    """Liveness check with current record counts."""
    return {
        "status": "healthy",
        "service": "condo-api",
        "version": __version__,
        "records": {
            "condos": store.condo_count,
            "listings": store.listing_count,
        },
    }
