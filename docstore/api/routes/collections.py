"""Collections — collection bookkeeping and document get-or-create/remove.

Invariants:
    - PUT never overwrites an existing document (get-or-create semantics)
    - DELETE of the last document removes the whole collection
    - Document data always returned as a deep copy
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from docstore.api.dependencies import get_store
from docstore.core.collection import Collection
from docstore.core.errors import ErrorContext, ResourceNotFoundError
from docstore.core.store import Store
from docstore.core.values import deep_copy
from docstore.schemas.store import (
    CollectionListResponse, CollectionResponse, DocResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/collections", tags=["collections"])


def get_collection_or_404(store: Store, name: str) -> Collection:
    collection = store.get_collection(name)
    if collection is None:
        raise ResourceNotFoundError(
            "Collection", name, ErrorContext(collection=name),
        )
    return collection


@router.get("", response_model=CollectionListResponse)
async def list_collections(store: Store = Depends(get_store)):
    return CollectionListResponse(names=store.collections.names())


@router.get("/{name}", response_model=CollectionResponse)
async def read_collection(name: str, store: Store = Depends(get_store)):
    collection = get_collection_or_404(store, name)
    return CollectionResponse(
        name=collection.name, size=collection.size, ids=list(collection.docs),
    )


@router.get("/{name}/docs/{doc_id}", response_model=DocResponse)
async def read_doc(name: str, doc_id: str, store: Store = Depends(get_store)):
    collection = get_collection_or_404(store, name)
    if doc_id not in collection.docs:
        raise ResourceNotFoundError(
            "Document", f"{name}/{doc_id}",
            ErrorContext(collection=name, doc_id=doc_id),
        )
    return DocResponse(
        collection=name, id=doc_id, data=deep_copy(collection.data.get(doc_id)),
    )


@router.put("/{name}/docs/{doc_id}", response_model=DocResponse)
async def get_or_create_doc(
    name: str, doc_id: str,
    data: Any = Body(None),
    store: Store = Depends(get_store),
):
    """Create the document if absent. Existing documents are left untouched."""
    created = store.get_doc(name, doc_id) is None
    store.get_or_create_doc(name, doc_id, data)
    if created:
        logger.info(
            "Document created", extra={"collection": name, "doc_id": doc_id},
        )
    collection = store.get_collection(name)
    return DocResponse(
        collection=name, id=doc_id, created=created,
        data=deep_copy(collection.data.get(doc_id)),
    )


@router.delete("/{name}/docs/{doc_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_doc(name: str, doc_id: str, store: Store = Depends(get_store)):
    """Remove one document. Missing collections and ids are silent no-ops."""
    collection = store.get_collection(name)
    if collection is not None:
        collection.remove(doc_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
