"""
Path grammar.

A path is a ``/``-separated list of segments. Each segment is a literal key,
``*`` (every entry), ``**`` (any number of levels, including none), or one of
those followed by ``|`` and a filter query such as ``Type`` or
``Type==AWS::S3::Bucket``.
"""

import re
from typing import List, Optional, Tuple

WILDCARD = "*"
RECURSIVE = "**"
FILTER_SEPARATOR = "|"
EQUALS = "=="

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def split_path(path: str) -> List[str]:
    """
    Splits a path into segments.

    The empty path yields a single empty segment, which then only matches a
    mapping key that is itself the empty string.
    """
    return path.split("/")


def split_segment(segment: str) -> Tuple[str, List[str]]:
    """
    Separates a segment's match key from its filter query.

    Only the first ``|`` splits; anything after it, further ``|`` included,
    belongs to the single filter query.

    Returns:
        (match key, list of filter queries), the list being empty when the
        segment carries no filter
    """
    parts = segment.split(FILTER_SEPARATOR, 1)
    if len(parts) == 2:
        return parts[0], [parts[1]]
    return segment, []


def parse_index(text: str) -> Optional[int]:
    """Returns ``text`` as a sequence index, or None if it is not a usable one."""
    if not _INDEX_RE.fullmatch(text):
        return None
    index = int(text)
    if index < 0:
        return None
    return index
