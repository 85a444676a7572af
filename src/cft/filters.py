"""
Filter evaluation for path segments.

A filter is checked against the candidate node itself: ``Type`` requires the
candidate to have a ``Type`` child, ``Type==X`` additionally requires that
child's literal to be ``X``.
"""

from typing import List, Optional

from .nodes import Node, get_map_value
from .path import EQUALS, parse_index


def _lookup(node: Node, key: str) -> Optional[Node]:
    if node.is_mapping():
        _, value = get_map_value(node, key)
        return value

    if node.is_sequence():
        index = parse_index(key)
        if index is None or index >= len(node.content):
            return None
        return node.content[index]

    # Scalars have nothing to inspect
    return None


def passes(node: Node, queries: List[str]) -> bool:
    """
    Checks a candidate node against every filter query of a segment.

    Args:
        node: Candidate node
        queries: Filter queries, empty when the segment has no filter

    Returns:
        True when all queries hold
    """
    for query in queries:
        parts = query.split(EQUALS)

        child = _lookup(node, parts[0])
        if child is None:
            return False

        # Only a plain key==value pair compares; extra "==" parts are ignored.
        # Non-scalar children carry an empty value and fail any non-empty comparison.
        if len(parts) == 2 and child.value != parts[1]:
            return False

    return True
