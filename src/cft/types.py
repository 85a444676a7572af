"""
Type definitions for the template path query engine.
"""

from typing import Any, Dict, List, Union

# Decoded template data - what a node turns into once converted to Python values
GenericValue = Union[str, int, float, bool, List[Any], Dict[Any, Any], None]
GenericMap = Dict[str, GenericValue]

# State summary types
ResourceSummary = Dict[str, GenericValue]
StateSummary = Dict[str, Union[str, List[ResourceSummary]]]
