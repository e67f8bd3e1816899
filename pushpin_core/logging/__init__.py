"""Logging infrastructure for Pushpin Core.

Key components:
    get_pipeline_logger: Factory function for creating Prefect-integrated loggers
    setup_logging: Initialize logging configuration from YAML or defaults
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from pushpin_core.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Store opened")

Note:
    Never import Python's logging module directly. Always use
    get_pipeline_logger() for consistent configuration.
"""

from .logging_config import LoggingConfig, get_pipeline_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_pipeline_logger",
]
