"""Logging configuration for Resource Provisioner.

Loggers come from Prefect's ``get_logger``, which places them under the
``prefect`` logger (``resource_provisioner.snapshot`` is created as
``prefect.resource_provisioner.snapshot``). Configuration is therefore keyed
by the names Prefect actually hands out.

Component defaults:
    resource_provisioner              INFO
    resource_provisioner.provisioner  INFO     conflict retries log at DEBUG and stay
                                               hidden, exhaustion logs at ERROR
    resource_provisioner.snapshot     WARNING  unreadable stream properties

Environment variables:
    RESOURCE_PROVISIONER_LOGGING_CONFIG: Path to a YAML dictConfig file
    RESOURCE_PROVISIONER_LOG_LEVEL: Level applied to every component, e.g.
                                    DEBUG to see individual retries
"""

import logging.config
import os
from pathlib import Path
from typing import Any

import yaml
from prefect.logging import get_logger

PACKAGE_LOGGER = "resource_provisioner"

COMPONENT_LOG_LEVELS = {
    PACKAGE_LOGGER: "INFO",
    f"{PACKAGE_LOGGER}.provisioner": "INFO",
    f"{PACKAGE_LOGGER}.snapshot": "WARNING",
}

CONFIG_PATH_ENV = "RESOURCE_PROVISIONER_LOGGING_CONFIG"
LOG_LEVEL_ENV = "RESOURCE_PROVISIONER_LOG_LEVEL"

_configured = False


def qualified_logger_name(name: str) -> str:
    """Name of the stdlib logger Prefect creates for ``name``."""
    return get_logger(name).name


def default_logging_config(level: str | None = None) -> dict[str, Any]:
    """Build the dictConfig used when no YAML file is configured.

    Args:
        level: Level for every component. Defaults to the
               RESOURCE_PROVISIONER_LOG_LEVEL environment variable, then to
               COMPONENT_LOG_LEVELS.
    """
    level = level or os.environ.get(LOG_LEVEL_ENV)
    loggers: dict[str, Any] = {}
    for name, default_level in COMPONENT_LOG_LEVELS.items():
        entry: dict[str, Any] = {"level": level or default_level}
        if name == PACKAGE_LOGGER:
            entry.update(handlers=["console"], propagate=False)
        loggers[qualified_logger_name(name)] = entry

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": loggers,
    }


def load_logging_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load a dictConfig from YAML, falling back to :func:`default_logging_config`.

    The file is taken from ``config_path`` or RESOURCE_PROVISIONER_LOGGING_CONFIG.
    A path that does not exist falls back to the defaults.
    """
    if config_path is None and (env_path := os.environ.get(CONFIG_PATH_ENV)):
        config_path = Path(env_path)

    if config_path is not None and config_path.exists():
        with open(config_path, "r") as f:
            return yaml.safe_load(f)
    return default_logging_config()


def setup_logging(config_path: Path | None = None, level: str | None = None) -> None:
    """Configure the provisioner loggers.

    Args:
        config_path: Optional YAML dictConfig file.
        level: Optional level forced onto every component after the
               configuration is applied.

    Example:
        >>> setup_logging(level="DEBUG")  # show every conflict retry
    """
    global _configured

    logging.config.dictConfig(load_logging_config(config_path))
    if level:
        for name in COMPONENT_LOG_LEVELS:
            get_logger(name).setLevel(level)
    _configured = True


def get_pipeline_logger(name: str):
    """Get a Prefect logger for a provisioner module, configuring logging on first use.

    Example:
        >>> logger = get_pipeline_logger(__name__)
        >>> logger.debug("Retrying create")
    """
    if not _configured:
        setup_logging()
    return get_logger(name)
