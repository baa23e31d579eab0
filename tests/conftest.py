"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _quiet_library_logs() -> Iterator[None]:
    """Put the library back to silent after tests that enable it."""
    yield
    logger.disable("goduration")


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect the library's log messages while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
