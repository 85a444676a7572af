"""
Template loading and decoding via PyYAML.

PyYAML's composer builds the raw node graph; it is converted into the
``Node`` model here without constructing any Python values, so short form
CloudFormation tags such as ``!Ref`` and ``!GetAtt`` survive as plain tags.
Decoding back to Python data goes the other way through a SafeLoader.
"""

from pathlib import Path
from typing import Any, Dict, Set, Union

import yaml
from yaml.resolver import BaseResolver

from ..utils import read_template_file, setup_logging
from .exceptions import DecodeError, TemplateParseError
from .nodes import Kind, Node, document
from .types import GenericValue

logger = setup_logging()


def _from_yaml(yaml_node: yaml.Node, seen: Dict[int, Node], active: Set[int]) -> Node:
    # An alias back to an enclosing anchor would make the tree cyclic
    if id(yaml_node) in active:
        mark = yaml_node.start_mark
        raise TemplateParseError(f"Recursive alias at line {mark.line + 1}, column {mark.column + 1}")

    # Aliases share one yaml node; keep them shared in the model as well
    existing = seen.get(id(yaml_node))
    if existing is not None:
        return existing

    if isinstance(yaml_node, yaml.ScalarNode):
        node = Node(Kind.SCALAR, value=yaml_node.value, tag=yaml_node.tag)
        seen[id(yaml_node)] = node
        return node

    if isinstance(yaml_node, yaml.SequenceNode):
        node = Node(Kind.SEQUENCE, tag=yaml_node.tag)
        seen[id(yaml_node)] = node
        active.add(id(yaml_node))
        node.content = [_from_yaml(item, seen, active) for item in yaml_node.value]
        active.discard(id(yaml_node))
        return node

    node = Node(Kind.MAPPING, tag=yaml_node.tag)
    seen[id(yaml_node)] = node
    active.add(id(yaml_node))
    for key, value in yaml_node.value:
        node.content.append(_from_yaml(key, seen, active))
        node.content.append(_from_yaml(value, seen, active))
    active.discard(id(yaml_node))
    return node


def _to_yaml(node: Node, seen: Dict[int, yaml.Node]) -> yaml.Node:
    existing = seen.get(id(node))
    if existing is not None:
        return existing

    if node.is_document():
        if len(node.content) != 1:
            raise DecodeError(f"Document has {len(node.content)} roots, expected exactly one")
        return _to_yaml(node.content[0], seen)

    if node.is_scalar():
        yaml_node: yaml.Node = yaml.ScalarNode(node.tag or BaseResolver.DEFAULT_SCALAR_TAG, node.value)
        seen[id(node)] = yaml_node
        return yaml_node

    if node.is_sequence():
        yaml_node = yaml.SequenceNode(node.tag or BaseResolver.DEFAULT_SEQUENCE_TAG, [])
        seen[id(node)] = yaml_node
        yaml_node.value.extend(_to_yaml(child, seen) for child in node.content)
        return yaml_node

    yaml_node = yaml.MappingNode(node.tag or BaseResolver.DEFAULT_MAPPING_TAG, [])
    seen[id(node)] = yaml_node
    for key, value in node.pairs():
        yaml_node.value.append((_to_yaml(key, seen), _to_yaml(value, seen)))
    return yaml_node


class _DecodeLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as text and tolerates custom tags."""


def _construct_tagged(loader: yaml.SafeLoader, tag_suffix: str, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode):
        return loader.construct_scalar(node)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_mapping(node, deep=True)


_DecodeLoader.add_constructor("tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str)
_DecodeLoader.add_multi_constructor("!", _construct_tagged)


def parse_string(text: str) -> Node:
    """
    Composes template source text into a document tree.

    Each YAML document in ``text`` becomes a DOCUMENT node under the returned
    root. JSON is accepted as well since it is valid YAML.

    Args:
        text: Template source

    Returns:
        Root DOCUMENT node

    Raises:
        TemplateParseError: If the source is not valid YAML or an alias refers to
            one of its own enclosing anchors
    """
    try:
        yaml_documents = list(yaml.compose_all(text, Loader=yaml.SafeLoader))
    except yaml.YAMLError as e:
        logger.error(f"Invalid template source: {e}")
        raise TemplateParseError(f"Invalid template source: {e}") from e

    documents = [document(_from_yaml(yaml_node, {}, set())) for yaml_node in yaml_documents if yaml_node is not None]

    if len(documents) == 1:
        return documents[0]

    root = document()
    root.content = documents
    return root


def parse_file(path: Union[str, Path]) -> Node:
    """Reads and composes a template file."""
    return parse_string(read_template_file(path, logger))


def decode_node(node: Node) -> GenericValue:
    """
    Decodes a node into plain Python data.

    Mappings become dicts, sequences lists and scalars are resolved by tag
    (ints, floats, bools, None). Timestamps and custom-tagged values are left
    as their text or plain container.

    Raises:
        DecodeError: If the node cannot be represented as Python data
    """
    try:
        yaml_node = _to_yaml(node, {})
        loader = _DecodeLoader("")
        try:
            return loader.construct_document(yaml_node)
        finally:
            loader.dispose()
    except DecodeError:
        raise
    except (yaml.YAMLError, TypeError, ValueError) as e:
        raise DecodeError(f"Error decoding node: {e}") from e


def to_yaml(node: Node) -> str:
    """Renders a node back into YAML text."""
    return yaml.serialize(_to_yaml(node, {}), Dumper=yaml.SafeDumper)
