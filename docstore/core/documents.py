"""Documents — the Document contract and the built-in local construction strategy.

Invariants:
    - A Document is owned by exactly one Collection
    - LocalDoc mirrors its snapshot into collection.data[id] on construction
    - Construction strategies are plain callables selected by name, never patched in

Design Decisions:
    - Protocol over ABC: structural subtyping, remote variants need no inheritance
    - default_strategies() returns a fresh dict per Store: no process-wide registry
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol

from docstore.core.domain_types import CollectionName, DocId, DocStrategyName
from docstore.core.values import lookup

if TYPE_CHECKING:
    from docstore.core.collection import Collection
    from docstore.core.store import Store


class Document(Protocol):
    """Structural contract for documents held by a Collection."""
    collection_name: CollectionName
    id: DocId


DocFactory = Callable[["Store", str, str, Any, "Collection"], Document]


class LocalDoc:
    """Document whose data lives only in the local data tree."""

    def __init__(
        self, store: Store, collection_name: str, id: str,
        data: Any, collection: Collection,
    ):
        self.store = store
        self.collection_name = collection_name
        self.id = id
        self.collection = collection
        self.snapshot = data
        self._update_collection_data()

    @property
    def collection_data(self) -> dict:
        return self.collection.data

    def _update_collection_data(self) -> None:
        self.collection_data[self.id] = self.snapshot

    def get(self, segments: list[str] | None = None) -> Any:
        """Live reference into this document's snapshot."""
        return lookup(segments or [], self.snapshot)

    def __repr__(self) -> str:
        return f"LocalDoc({self.collection_name!r}, {self.id!r})"


def default_strategies() -> dict[str, DocFactory]:
    """Strategies every Store starts with. Only 'local' ships with the core."""
    return {DocStrategyName.LOCAL.value: LocalDoc}
