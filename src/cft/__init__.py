"""
CloudFormation Template Path Query Package.

This package locates nodes inside CloudFormation-style templates using a small
path language:

- ``Resources/MyBucket/Type`` - literal keys, separated by ``/``
- ``Resources/*/Type`` - ``*`` matches every map entry or sequence element
- ``**/Name`` - ``**`` matches any number of levels, including none
- ``Resources/*|Type==AWS::S3::Bucket`` - ``|`` attaches a filter checked on the candidate

Templates are composed from YAML (or JSON) text with PyYAML and queried via
the ``Template`` facade.
"""

from .exceptions import (
    AmbiguousPathError,
    CftError,
    DecodeError,
    NodeNotFoundError,
    PathNotFoundError,
    SectionNotFoundError,
    TemplateParseError,
)
from .loader import decode_node, parse_file, parse_string, to_yaml
from .matcher import match_path
from .nodes import Kind, Node, get_map_value
from .path import split_path
from .state import state_summary
from .template import Template

__all__ = [
    "Template",
    "Node",
    "Kind",
    "match_path",
    "split_path",
    "get_map_value",
    "parse_string",
    "parse_file",
    "decode_node",
    "to_yaml",
    "state_summary",
    "CftError",
    "TemplateParseError",
    "DecodeError",
    "SectionNotFoundError",
    "NodeNotFoundError",
    "PathNotFoundError",
    "AmbiguousPathError",
]
