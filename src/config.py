"""
Configuration loader for the CloudFormation template path query tool.
"""

import os
from dataclasses import dataclass
from typing import Optional

OUTPUT_FORMATS = ("pretty", "json")
MATCH_MODES = ("all", "one")


@dataclass
class Config:
    """Configuration class for the query tool."""

    template_path: Optional[str] = None
    log_level: str = "INFO"
    output_format: str = "pretty"
    match_mode: str = "all"


def load_config(require_template_path: bool = True) -> Config:
    """
    Loads and validates configuration from the environment.

    Args:
        require_template_path: Whether TEMPLATE_FILE_PATH must be set; callers
            that receive the template inline can pass False

    Returns:
        Config object with validated settings

    Raises:
        ValueError: If required configuration is missing or invalid
    """
    # Required configuration
    template_path = os.environ.get("TEMPLATE_FILE_PATH")
    if not template_path and require_template_path:
        raise ValueError("TEMPLATE_FILE_PATH environment variable is required")

    # Optional configuration with defaults
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        raise ValueError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, got '{log_level}'")

    output_format = os.environ.get("OUTPUT_FORMAT", "pretty")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}")

    match_mode = os.environ.get("MATCH_MODE", "all")
    if match_mode not in MATCH_MODES:
        raise ValueError(f"MATCH_MODE must be one of {', '.join(MATCH_MODES)}")

    return Config(
        template_path=template_path,
        log_level=log_level,
        output_format=output_format,
        match_mode=match_mode,
    )
