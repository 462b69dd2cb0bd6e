"""Logging configuration and utilities using Loguru.

The library never configures logging on import. Records emitted by
``pureobject`` modules are disabled until an application opts in, either by
calling ``setup_loguru_logger`` or by enabling the package on its own Loguru
setup with ``logger.enable("pureobject")``.

Public API:
----------
setup_loguru_logger(verbose: bool = False) -> int
    Configure a console sink, enable library records, return the sink id

get_logger(name: str) -> Logger
    Get a context-aware logger for your module
    Args: name - Usually __name__ from the calling module
    Usage: logger = get_logger(__name__)

Quick Start:
-----------
    ```python
    from pureobject.config import setup_loguru_logger
    setup_loguru_logger(verbose=True)
    ```
"""

import sys
from typing import Any

from loguru import logger

from .settings import settings

PACKAGE_NAME = "pureobject"


def setup_loguru_logger(verbose: bool = False) -> int:
    """Configure Loguru for an application that wants library records.

    Args:
        verbose: Enable debug level and detailed tracebacks

    Returns:
        Handler id of the console sink, for use with ``logger.remove``

    Note:
        - Removes the default handler and installs a colourised console sink
        - Re-enables records from the ``pureobject`` package
    """
    logger.remove()

    logger.configure(extra={"service": PACKAGE_NAME, "module": "root"})

    console_level = "DEBUG" if verbose else settings.logging.console_level
    handler_id = logger.add(
        sink=sys.stderr,
        level=console_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:"
            "<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )

    logger.enable(PACKAGE_NAME)
    return handler_id


def get_logger(name: str) -> Any:  # Use Any for Loguru logger type
    """Get a pre-configured logger instance for the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Loguru logger bound with module context

    Example:
        ```python
        logger = get_logger(__name__)
        logger.debug("Merged objects", count=3)
        ```
    """
    return logger.bind(
        module=name,
        service=PACKAGE_NAME,
    )
