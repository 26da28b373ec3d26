"""
Logging utilities for the Deploy Test Application.

Provides standardized logger configuration shared by the entry point and
the route modules.

Logging rules:
- Request bodies are logged only as a short, truncated preview
- Greeting names and echo payloads are never logged in full
"""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure the root logger once for the whole process.

    Args:
        level: Logging level name (e.g. "DEBUG") or numeric level
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (inherits the root level when omitted)

    Returns:
        Configured logger instance

    Usage:
        >>> from deploy_app.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level)

    return logger


def preview(value: object, limit: int = 200) -> str:
    """Return ``str(value)`` truncated to ``limit`` characters for log output."""
    text = str(value)
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
