"""Store Schemas — Pydantic response models for the inspection API.

Invariants:
    - Values returned over HTTP are always deep copies, never live references

Design Decisions:
    - Any for document data: the store holds arbitrary JSON-like values
"""

from typing import Any

from pydantic import BaseModel, Field


class ValueResponse(BaseModel):
    """Value found at a path."""
    path: str
    value: Any


class CollectionResponse(BaseModel):
    """Public view of one Collection's bookkeeping."""
    name: str
    size: int
    ids: list[str] = Field(default_factory=list)


class CollectionListResponse(BaseModel):
    names: list[str] = Field(default_factory=list)


class DocResponse(BaseModel):
    """A document's data plus whether this call created it."""
    collection: str
    id: str
    created: bool = False
    data: Any = None
