"""Path Tokenizer — default dotted-path collaborator.

Invariants:
    - Deterministic: same string always yields the same segments
    - "" yields [] which addresses the whole store
    - Non-string input raises InvalidPathError (never silently coerced)

Design Decisions:
    - Injectable on Store: callers with their own path syntax pass a different tokenizer
"""

from collections.abc import Callable

from docstore.core.domain_types import PATH_SEPARATOR, Segments
from docstore.core.errors import InvalidPathError

PathTokenizer = Callable[[str], Segments]


def split_path(subpath: str) -> Segments:
    """Split a dotted path into segments. Empty path -> []."""
    if not isinstance(subpath, str):
        raise InvalidPathError(subpath)
    if not subpath:
        return []
    return subpath.split(PATH_SEPARATOR)


def join_path(segments: Segments) -> str:
    return PATH_SEPARATOR.join(segments)
