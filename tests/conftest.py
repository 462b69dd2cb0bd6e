import sys

import pytest
from loguru import logger

from pureobject.config import PACKAGE_NAME, setup_loguru_logger


@pytest.fixture
def captured_logs():
    """Collect every Loguru message emitted while the test runs."""
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def enabled_library_logging():
    """Enable pureobject records for one test, restoring the default after."""
    logger.enable(PACKAGE_NAME)
    yield
    logger.disable(PACKAGE_NAME)


@pytest.fixture
def console_logging():
    """Run setup_loguru_logger for one test, then restore Loguru's default sink."""
    handler_id = setup_loguru_logger(verbose=True)
    yield handler_id
    logger.remove(handler_id)
    logger.configure(extra={})
    logger.add(sys.stderr)
    logger.disable(PACKAGE_NAME)
