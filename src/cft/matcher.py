"""
Recursive path matcher.

``match_path`` walks a node tree depth-first in document order and yields
every node reached by consuming all segments. It is a generator, so callers
can stop early without leaving any traversal state behind.
"""

from typing import Iterator, List

from .filters import passes
from .nodes import Node
from .path import RECURSIVE, WILDCARD, parse_index, split_segment


def match_path(node: Node, segments: List[str]) -> Iterator[Node]:
    """
    Yields all nodes below ``node`` that match the remaining path segments.

    Args:
        node: Node to match from
        segments: Remaining path segments, as produced by ``split_path``

    Yields:
        Matching nodes in document order
    """
    # Documents are transparent and never consume a segment
    if node.is_document():
        for child in node.content:
            yield from match_path(child, segments)
        return

    if not segments:
        yield node
        return

    head, tail = segments[0], segments[1:]

    if head == RECURSIVE:
        # Zero levels first, then let each child absorb one more level
        yield from match_path(node, tail)

        if node.is_mapping() or node.is_sequence():
            for child in node.children():
                yield from match_path(child, segments)

    key, queries = split_segment(head)

    if node.is_mapping():
        for key_node, value in node.pairs():
            if key == WILDCARD or key_node.value == key:
                if passes(value, queries):
                    yield from match_path(value, tail)

    elif node.is_sequence():
        if key == WILDCARD:
            for child in node.content:
                if passes(child, queries):
                    yield from match_path(child, tail)
        else:
            index = parse_index(key)
            if index is not None and index < len(node.content):
                child = node.content[index]
                if passes(child, queries):
                    yield from match_path(child, tail)
