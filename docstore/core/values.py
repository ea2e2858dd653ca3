"""Value Accessor Helpers — segment traversal and copy policies over plain data.

Invariants:
    - lookup() returns a LIVE reference: mutating the result mutates the tree
    - lookup([] , root) is root itself; any missing intermediate key yields None
    - shallow_copy isolates the first level only; nested values stay shared
    - deep_copy rebuilds every reachable list/dict; other values pass by reference
    - delete_path() removes exactly one key and never touches siblings

Design Decisions:
    - Only list and dict are containers: the tree holds JSON-like data
    - No memo in deep_copy: cyclic values recurse until RecursionError (known limitation)
    - Integer-like segments index lists ("items.0"), mirroring dotted JSON paths
"""

from typing import Any

from docstore.core.domain_types import Segments


def _list_index(container: list, segment: str) -> int | None:
    """Parse a segment as a list index. None when not a valid in-range index."""
    if not (segment.isascii() and segment.isdecimal()):
        return None
    index = int(segment)
    if index >= len(container):
        return None
    return index


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, dict):
        return node.get(segment)
    if isinstance(node, list):
        index = _list_index(node, segment)
        return None if index is None else node[index]
    return None


def lookup(segments: Segments, root: Any) -> Any:
    """Walk root following each segment. Live reference, or None on miss."""
    node = root
    for segment in segments:
        node = _child(node, segment)
        if node is None:
            return None
    return node


def shallow_copy(value: Any) -> Any:
    """One-level copy: new list/dict holding the same element references."""
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def deep_copy(value: Any) -> Any:
    """Recursive copy of lists and dicts. Anything else is returned as-is."""
    if isinstance(value, list):
        return [deep_copy(item) for item in value]
    if isinstance(value, dict):
        return {key: deep_copy(item) for key, item in value.items()}
    return value


def delete_path(segments: Segments, root: Any) -> Any:
    """Delete the value at segments from root. Returns removed value or None.

    Requires at least one segment: the root itself is never removed here.
    """
    if not segments:
        raise ValueError("delete_path requires at least one segment")
    parent = lookup(segments[:-1], root)
    key = segments[-1]
    if isinstance(parent, dict):
        return parent.pop(key, None)
    if isinstance(parent, list):
        index = _list_index(parent, key)
        return None if index is None else parent.pop(index)
    return None
