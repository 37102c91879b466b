"""Prefect-integrated logging for Resource Provisioner.

Example:
    >>> from resource_provisioner.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Provisioning started")

Note:
    Use get_pipeline_logger() rather than logging.getLogger() so the
    configuration is applied before first use.
"""

from .logging_config import COMPONENT_LOG_LEVELS, get_pipeline_logger, load_logging_config, setup_logging

__all__ = [
    "COMPONENT_LOG_LEVELS",
    "get_pipeline_logger",
    "load_logging_config",
    "setup_logging",
]
