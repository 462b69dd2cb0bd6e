"""Configuration module for pureobject.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> int
    Configure Loguru and enable library records

Usage:
------
```python
from pureobject.config import settings
level = settings.logging.console_level

from pureobject.config import get_logger
logger = get_logger(__name__)
logger.debug("Starting operation")
```
"""

from .logging import PACKAGE_NAME, get_logger, setup_loguru_logger
from .settings import Settings, settings

__all__ = [
    "PACKAGE_NAME",
    "Settings",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
