"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CollectionName and DocId wrap str — never pass raw keys through the core
    - Segments is an ordered list of tokens; [] means "the whole store"
    - All document strategy names encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to configuration strings loaded from env
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

CollectionName = NewType("CollectionName", str)
DocId = NewType("DocId", str)


# ─── Structural Types ────────────────────────────────────────────

Segments = list[str]
CollectionData = dict[str, Any]   # id -> raw document value
DataTree = dict[str, Any]         # collection name -> CollectionData


# ─── Enums ───────────────────────────────────────────────────────

class DocStrategyName(str, Enum):
    """Named document construction strategies."""
    LOCAL = "local"
    REMOTE = "remote"


class DestroyScope(str, Enum):
    """Which branch of the destroy cascade a segment count selects."""
    STORE = "store"            # 0 segments
    COLLECTION = "collection"  # 1 segment
    VALUE = "value"            # 2+ segments

    @classmethod
    def for_depth(cls, depth: int) -> "DestroyScope":
        if depth == 0:
            return cls.STORE
        if depth == 1:
            return cls.COLLECTION
        return cls.VALUE


# ─── Constants ───────────────────────────────────────────────────

PATH_SEPARATOR = "."
