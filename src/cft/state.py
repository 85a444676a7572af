"""
Deployment state helpers.

Templates deployed with a local state record carry a ``State`` section next to
``Resources``. It records where the template came from, when it was last
written, and one resource model per resource (its physical identifier plus
the properties as last deployed). This module pairs each resource with its
stored model so callers can compare it against live state elsewhere.
"""

from typing import List

from ..utils import setup_logging
from .exceptions import NodeNotFoundError
from .loader import decode_node
from .nodes import get_map_value
from .sections import RESOURCES, STATE
from .template import Template
from .types import ResourceSummary, StateSummary

logger = setup_logging()

FILE_PATH = "FilePath"
LAST_WRITE_TIME = "LastWriteTime"
RESOURCE_MODELS = "ResourceModels"


def state_summary(template: Template) -> StateSummary:
    """
    Summarises the deployment state stored in a template.

    Args:
        template: Template containing ``Resources`` and ``State`` sections

    Returns:
        Dictionary with the local file path, last write time and one entry per
        resource holding its name, type, identifier and decoded model

    Raises:
        SectionNotFoundError: If either section is missing
        NodeNotFoundError: If a state field, resource model, type or identifier is missing
        DecodeError: If a stored model cannot be decoded
    """
    resources = template.get_section(RESOURCES)
    template.get_section(STATE)

    file_path = template.get_node(STATE, FILE_PATH)
    last_write = template.get_node(STATE, LAST_WRITE_TIME)
    resource_models = template.get_node(STATE, RESOURCE_MODELS)

    summaries: List[ResourceSummary] = []
    for key_node, resource_node in resources.pairs():
        name = key_node.value

        _, model = get_map_value(resource_models, name)
        if model is None:
            raise NodeNotFoundError(RESOURCE_MODELS, name)

        _, resource_type = get_map_value(resource_node, "Type")
        if resource_type is None:
            raise NodeNotFoundError(name, "Type")

        _, identifier = get_map_value(model, "Identifier")
        if identifier is None:
            raise NodeNotFoundError(f"{RESOURCE_MODELS}/{name}", "Identifier")

        _, stored_model = get_map_value(model, "Model")
        if stored_model is None:
            raise NodeNotFoundError(f"{RESOURCE_MODELS}/{name}", "Model")

        summaries.append(
            {
                "resource_name": name,
                "resource_type": resource_type.value,
                "identifier": identifier.value,
                "title": f"{name} ({resource_type.value} {identifier.value})",
                "model": decode_node(stored_model),
            }
        )

    logger.info(f"Found {len(summaries)} resource models in state")

    return {
        "file_path": file_path.value,
        "last_write_time": last_write.value,
        "resources": summaries,
    }
