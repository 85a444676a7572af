"""
Document model for templates.

A template is a tree of ``Node`` objects. Mappings keep their entries as a
flat ``[key, value, key, value, ...]`` list so that source order survives and
keys stay addressable as nodes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class Kind(Enum):
    """Node kinds."""

    DOCUMENT = "document"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


STR_TAG = "tag:yaml.org,2002:str"
MAP_TAG = "tag:yaml.org,2002:map"
SEQ_TAG = "tag:yaml.org,2002:seq"


@dataclass(eq=False, repr=False)
class Node:
    """
    A single node of a template tree.

    Attributes:
        kind: Node kind
        value: Literal text for scalars, empty string otherwise
        content: Ordered children (documents, sequences) or flat key/value list (mappings)
        tag: YAML tag of the node, kept for decoding only
    """

    kind: Kind
    value: str = ""
    content: List["Node"] = field(default_factory=list)
    tag: str = ""

    def is_document(self) -> bool:
        return self.kind is Kind.DOCUMENT

    def is_mapping(self) -> bool:
        return self.kind is Kind.MAPPING

    def is_sequence(self) -> bool:
        return self.kind is Kind.SEQUENCE

    def is_scalar(self) -> bool:
        return self.kind is Kind.SCALAR

    def pairs(self) -> Iterator[Tuple["Node", "Node"]]:
        """Yields (key, value) pairs of a mapping in source order."""
        for i in range(0, len(self.content) - 1, 2):
            yield self.content[i], self.content[i + 1]

    def children(self) -> List["Node"]:
        """Returns mapping values, sequence elements or document roots."""
        if self.is_mapping():
            return self.content[1::2]
        return list(self.content)

    def __repr__(self) -> str:
        if self.is_scalar():
            return f"Node(scalar, {self.value!r})"
        return f"Node({self.kind.value}, {len(self.content)} items)"


def scalar(value: str, tag: str = STR_TAG) -> Node:
    return Node(Kind.SCALAR, value=value, tag=tag)


def mapping(*entries: Tuple[str, Node]) -> Node:
    """Builds a mapping node from (key, value) tuples."""
    content: List[Node] = []
    for key, value in entries:
        content.append(scalar(key))
        content.append(value)
    return Node(Kind.MAPPING, content=content, tag=MAP_TAG)


def sequence(*items: Node) -> Node:
    return Node(Kind.SEQUENCE, content=list(items), tag=SEQ_TAG)


def document(root: Optional[Node] = None) -> Node:
    return Node(Kind.DOCUMENT, content=[root] if root is not None else [])


def get_map_value(node: Optional[Node], key: str) -> Tuple[Optional[Node], Optional[Node]]:
    """
    Looks up a key in a mapping node.

    Args:
        node: Node to search, may be None or a non-mapping
        key: Literal key to find

    Returns:
        (key node, value node) for the first matching entry, or (None, None)
    """
    if node is None or not node.is_mapping():
        return None, None

    for key_node, value_node in node.pairs():
        if key_node.value == key:
            return key_node, value_node

    return None, None
