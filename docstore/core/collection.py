"""Collection — a named group of documents with a live size and a shared data slice.

Invariants:
    - collection.data IS store.data[collection.name] (same dict, never copied)
    - size == len(docs) outside a single get_or_create_doc / remove call
    - add() does NOT touch size: callers owning the counter must adjust it
    - get_or_create_doc() on a hit returns the existing doc and ignores data
    - remove() of the last document destroys the whole Collection; removing a
      non-last document prunes only that id from docs and data
    - After destroy() the handle is stale: destroyed is True and data is orphaned

Design Decisions:
    - Last-removal destroys wholesale instead of deleting the key first:
      a re-created Collection starts from fresh state
    - Store passed in explicitly: no ambient root object
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from docstore.core.domain_types import CollectionData

if TYPE_CHECKING:
    from docstore.core.documents import DocFactory, Document
    from docstore.core.store import Store

logger = logging.getLogger(__name__)


class Collection:
    """Documents keyed by id, mirrored into the store's data tree."""

    def __init__(self, store: Store, name: str, doc_factory: DocFactory):
        self.store = store
        self.name = name
        self.doc_factory = doc_factory
        self.size = 0
        self.docs: dict[str, Document] = {}
        self.data: CollectionData = {}
        store.data[name] = self.data
        self.destroyed = False

    def add(self, id: str, data: Any) -> Document:
        """Construct a document via the strategy and register it under id."""
        doc = self.doc_factory(self.store, self.name, id, data, self)
        self.docs[id] = doc
        return doc

    def get_or_create_doc(self, id: str, data: Any = None) -> Document:
        doc = self.docs.get(id)
        if doc is not None:
            return doc
        self.size += 1
        return self.add(id, data)

    def remove(self, id: str) -> None:
        """Remove the document with id. Destroys the Collection when it empties."""
        if id not in self.docs:
            return
        self.size -= 1
        if self.size > 0:
            del self.docs[id]
            self.data.pop(id, None)
        else:
            self.destroy()

    def destroy(self) -> None:
        """Drop this Collection from the registry and its key from the data tree."""
        self.store.collections.remove(self.name)
        self.store.data.pop(self.name, None)
        self.destroyed = True
        logger.debug(
            "Collection destroyed", extra={"collection": self.name},
        )

    def __repr__(self) -> str:
        return f"Collection({self.name!r}, size={self.size})"
