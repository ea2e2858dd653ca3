"""Health Probe — liveness endpoint.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
"""

from fastapi import APIRouter, Depends, status

from docstore.api.dependencies import get_store
from docstore.core.store import Store

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(store: Store = Depends(get_store)):
    """Liveness probe. Reports the store generation and collection count."""
    return {
        "status": "healthy",
        "service": "docstore",
        "generation": store.generation,
        "collections": len(store.collections),
    }
