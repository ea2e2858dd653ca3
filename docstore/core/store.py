"""Store — explicit owner of the collection registry and the mirrored data tree.

Invariants:
    - store.data is a stable handle: never rebound, a full destroy drains it in place
    - store.collections may be replaced (full destroy); never cache it across destroy()
    - generation increments on every full-store destroy
    - get() returns a live reference; get_copy()/get_deep_copy() isolate 1 / all levels
    - destroy() runs the silent reactive teardown BEFORE any data removal
    - Soft-miss: absent paths return None, absent collections/ids are no-ops

Design Decisions:
    - Single explicit object passed by reference, no module-level root state
    - Document strategy chosen per collection name from strategy_overrides,
      falling back to default_strategy (configuration, not runtime patching)
    - Segment-level variants (_get, _get_copy, ...) for callers holding tokenized paths
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from docstore.core.collection import Collection
from docstore.core.documents import DocFactory, Document, default_strategies
from docstore.core.domain_types import DataTree, DestroyScope, DocStrategyName, Segments
from docstore.core.errors import ErrorContext, UnknownDocStrategyError
from docstore.core.paths import PathTokenizer, join_path, split_path
from docstore.core.registry import CollectionRegistry
from docstore.core.teardown import NullTeardown, ReactiveTeardown, run_teardown
from docstore.core.values import deep_copy, delete_path, lookup, shallow_copy

if TYPE_CHECKING:
    from docstore.config import Settings

logger = logging.getLogger(__name__)


class Store:
    """In-memory hierarchical document store."""

    def __init__(
        self,
        teardown: ReactiveTeardown | None = None,
        tokenizer: PathTokenizer = split_path,
        default_strategy: str = DocStrategyName.LOCAL.value,
        strategy_overrides: Mapping[str, str] | None = None,
        strategies: Mapping[str, DocFactory] | None = None,
    ):
        self.teardown: ReactiveTeardown = (
            teardown if teardown is not None else NullTeardown()
        )
        self._split_path = tokenizer
        self.default_strategy = default_strategy
        self.strategy_overrides: dict[str, str] = dict(strategy_overrides or {})
        self.strategies: dict[str, DocFactory] = (
            dict(strategies) if strategies is not None else default_strategies()
        )
        self.data: DataTree = {}
        self.collections = CollectionRegistry(self._build_collection)
        self.generation = 0

    @classmethod
    def from_settings(
        cls, settings: Settings, teardown: ReactiveTeardown | None = None,
    ) -> Store:
        return cls(
            teardown=teardown,
            default_strategy=settings.default_doc_strategy,
            strategy_overrides=settings.strategy_overrides,
        )

    # --- Strategy selection ------------------------------------------------

    def register_doc_strategy(self, name: str, factory: DocFactory) -> None:
        """Make a named construction strategy (e.g. 'remote') selectable."""
        self.strategies[name] = factory

    def doc_factory_for(self, collection_name: str) -> DocFactory:
        strategy = self.strategy_overrides.get(
            collection_name, self.default_strategy,
        )
        factory = self.strategies.get(strategy)
        if factory is None:
            raise UnknownDocStrategyError(
                strategy, ErrorContext(collection=collection_name),
            )
        return factory

    def _build_collection(self, name: str) -> Collection:
        collection = Collection(self, name, self.doc_factory_for(name))
        logger.debug("Collection created", extra={"collection": name})
        return collection

    # --- Collections & documents -------------------------------------------

    def get_collection(self, name: str) -> Collection | None:
        return self.collections.get(name)

    def get_doc(self, collection_name: str, id: str) -> Document | None:
        collection = self.collections.get(collection_name)
        return collection.docs.get(id) if collection is not None else None

    def get_or_create_collection(self, name: str) -> Collection:
        return self.collections.get_or_create(name)

    def get_or_create_doc(
        self, collection_name: str, id: str, data: Any = None,
    ) -> Document:
        """Return the doc with id, creating it with data only if it is absent."""
        collection = self.get_or_create_collection(collection_name)
        return collection.get_or_create_doc(id, data)

    # --- Value access ------------------------------------------------------

    def get(self, subpath: str = "") -> Any:
        return self._get(self._split_path(subpath))

    def _get(self, segments: Segments) -> Any:
        return lookup(segments, self.data)

    def get_copy(self, subpath: str = "") -> Any:
        return self._get_copy(self._split_path(subpath))

    def _get_copy(self, segments: Segments) -> Any:
        return shallow_copy(self._get(segments))

    def get_deep_copy(self, subpath: str = "") -> Any:
        return self._get_deep_copy(self._split_path(subpath))

    def _get_deep_copy(self, segments: Segments) -> Any:
        return deep_copy(self._get(segments))

    # --- Destroy -----------------------------------------------------------

    def destroy(self, subpath: str = "") -> None:
        """Tear down reactive machinery under subpath, then remove its data."""
        self._destroy(self._split_path(subpath))

    def _destroy(self, segments: Segments) -> None:
        run_teardown(self.teardown, segments)

        scope = DestroyScope.for_depth(len(segments))
        if scope is DestroyScope.STORE:
            self.collections = CollectionRegistry(self._build_collection)
            # Drain in place so holders of store.data keep the same object
            for key in list(self.data):
                del self.data[key]
            self.generation += 1
            logger.info(
                "Store destroyed", extra={"generation": self.generation},
            )
        elif scope is DestroyScope.COLLECTION:
            collection = self.collections.get(segments[0])
            if collection is not None:
                collection.destroy()
        else:
            delete_path(segments, self.data)
            logger.debug(
                "Value destroyed",
                extra={"path": join_path(segments), "depth": len(segments)},
            )
