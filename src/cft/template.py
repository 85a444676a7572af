"""
Template facade.

``Template`` wraps a root document node and exposes path queries, strict
lookups and decoding to plain Python data.
"""

from pathlib import Path
from typing import Iterator, Optional, Union

from ..utils import setup_logging
from .exceptions import (
    AmbiguousPathError,
    DecodeError,
    NodeNotFoundError,
    PathNotFoundError,
    SectionNotFoundError,
)
from .loader import decode_node, parse_file, parse_string
from .matcher import match_path
from .nodes import Node, get_map_value
from .path import split_path
from .types import GenericMap

logger = setup_logging()


def _document_roots(node: Node) -> Iterator[Node]:
    if node.is_document():
        for child in node.content:
            yield from _document_roots(child)
    else:
        yield node


class Template:
    """A CloudFormation template backed by a document tree."""

    def __init__(self, root: Node) -> None:
        if not root.is_document():
            raise ValueError(f"Template root must be a document node, got {root.kind.value}")
        self.root = root

    @classmethod
    def from_string(cls, text: str) -> "Template":
        return cls(parse_string(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Template":
        return cls(parse_file(path))

    def match_path(self, path: str) -> Iterator[Node]:
        """
        Returns all nodes that match ``path``, lazily and in document order.

        Segments are separated by ``/``. ``*`` matches any map key or sequence
        index, ``**`` matches any number of levels including none, and a
        segment may carry a filter after ``|``, e.g. ``Resources/*|Type==AWS::S3::Bucket``.
        """
        return match_path(self.root, split_path(path))

    def get_path(self, path: str) -> Optional[Node]:
        """
        Returns the node matching ``path``.

        None is returned both when nothing matches and when more than one
        node matches; use ``require_path`` to tell the two apart.
        """
        results = list(self.match_path(path))
        logger.debug(f"Path '{path}' matched {len(results)} node(s)")

        if len(results) != 1:
            return None

        return results[0]

    def require_path(self, path: str) -> Node:
        """
        Returns the single node matching ``path``.

        Raises:
            PathNotFoundError: If nothing matches
            AmbiguousPathError: If more than one node matches
        """
        results = list(self.match_path(path))
        if not results:
            raise PathNotFoundError(path)
        if len(results) > 1:
            raise AmbiguousPathError(path, len(results))
        return results[0]

    def get_section(self, section: str) -> Node:
        """
        Returns the value node of a top-level section.

        Raises:
            SectionNotFoundError: If the template has no such section
        """
        for root in _document_roots(self.root):
            _, value = get_map_value(root, section)
            if value is not None:
                return value

        raise SectionNotFoundError(section)

    def get_node(self, section: str, name: str) -> Node:
        """
        Returns the value node of ``name`` inside ``section``.

        Raises:
            SectionNotFoundError: If the section is missing
            NodeNotFoundError: If the section has no entry called ``name``
        """
        _, value = get_map_value(self.get_section(section), name)
        if value is None:
            raise NodeNotFoundError(section, name)
        return value

    def to_map(self) -> GenericMap:
        """
        Decodes the whole template into a dict.

        Raises:
            DecodeError: If the template cannot be decoded or is not a mapping
        """
        out = decode_node(self.root)
        if not isinstance(out, dict):
            raise DecodeError(f"Error converting template to map: root is {type(out).__name__}")
        return out
