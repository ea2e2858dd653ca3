"""Store Paths — read and destroy arbitrary sub-paths of the data tree.

Invariants:
    - GET returns a deep copy of the value (root path returns the whole tree)
    - GET on a missing path → 404 ResourceNotFoundError
    - DELETE runs the full destroy cascade and is a silent no-op on misses (204)
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from docstore.api.dependencies import get_store
from docstore.core.errors import ErrorContext, ResourceNotFoundError
from docstore.core.store import Store
from docstore.schemas.store import ValueResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/store", tags=["store"])


@router.get("", response_model=ValueResponse)
async def read_path(
    path: str = Query(""), store: Store = Depends(get_store),
):
    value = store.get_deep_copy(path)
    if value is None:
        raise ResourceNotFoundError("Path", path, ErrorContext(path=path))
    return ValueResponse(path=path, value=value)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def destroy_path(
    path: str = Query(""), store: Store = Depends(get_store),
):
    """Destroy everything at or under path."""
    store.destroy(path)
    logger.info("Path destroyed via API", extra={"path": path})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
