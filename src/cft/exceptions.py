"""
Exception types raised by the template path query engine.

Path matching itself never raises: unknown keys, bad indices and failed
filters only prune the search. These errors come from loading, decoding and
from the strict lookup helpers built on top of the matcher.
"""


class CftError(Exception):
    """Base class for all template errors."""


class TemplateParseError(CftError):
    """The template source could not be composed into a document tree."""


class DecodeError(CftError):
    """A node could not be decoded into plain Python data."""


class SectionNotFoundError(CftError):
    """A top-level template section is missing."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Section '{section}' not found in template")
        self.section = section


class NodeNotFoundError(CftError):
    """A named entry is missing from a template section."""

    def __init__(self, section: str, name: str) -> None:
        super().__init__(f"'{name}' not found in section '{section}'")
        self.section = section
        self.name = name


class PathNotFoundError(CftError):
    """A path matched no nodes."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No node matches path '{path}'")
        self.path = path


class AmbiguousPathError(CftError):
    """A path expected to be unique matched several nodes."""

    def __init__(self, path: str, count: int) -> None:
        super().__init__(f"Path '{path}' matches {count} nodes, expected exactly one")
        self.path = path
        self.count = count
