"""
Utility functions for the CloudFormation template path query tool.
"""

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Sets up logging configuration for the query tool.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("cft_path")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def read_template_file(
    path: Union[str, Path], logger: Optional[logging.Logger] = None
) -> str:
    """
    Reads a template file and returns its content as a string.

    Args:
        path: Local path to the template file
        logger: Logger instance for error logging

    Returns:
        File content as string

    Raises:
        ValueError: If the path is empty
        OSError: If the file cannot be read
    """
    if logger is None:
        logger = setup_logging()

    if not str(path):
        raise ValueError("Template path must not be empty")

    try:
        logger.info(f"Reading template file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        logger.info(f"Successfully read {len(content)} characters from {path}")
        return content

    except OSError as e:
        logger.error(f"Failed to read template file {path}: {str(e)}")
        raise
