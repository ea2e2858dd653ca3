"""Collection Registry — name -> Collection, root of collection lifecycle.

Invariants:
    - At most one Collection per name
    - get() never creates; get_or_create() is idempotent
    - Construction delegated to the builder given at init (Store decides the strategy)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from docstore.core.collection import Collection

CollectionBuilder = Callable[[str], "Collection"]


class CollectionRegistry:
    """Mapping of collection name to its single live Collection."""

    def __init__(self, builder: CollectionBuilder):
        self._builder = builder
        self._collections: dict[str, Collection] = {}

    def get(self, name: str) -> Collection | None:
        return self._collections.get(name)

    def get_or_create(self, name: str) -> Collection:
        collection = self._collections.get(name)
        if collection is not None:
            return collection
        collection = self._builder(name)
        self._collections[name] = collection
        return collection

    def remove(self, name: str) -> None:
        self._collections.pop(name, None)

    def names(self) -> list[str]:
        return list(self._collections)

    def __contains__(self, name: object) -> bool:
        return name in self._collections

    def __len__(self) -> int:
        return len(self._collections)

    def __iter__(self) -> Iterator[Collection]:
        return iter(list(self._collections.values()))
