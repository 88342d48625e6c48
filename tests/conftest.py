"""
Pytest configuration and shared fixtures for Objectware tests.
"""
import os

import pytest

# Library logging stays off unless a test opts in through captured_logs.
os.environ.pop("OBJECTWARE_DEBUG", None)

from objectware.utils.logger import disable_logging, enable_logging, logger  # noqa: E402


@pytest.fixture
def captured_logs():
    """Enable Objectware logging and collect message texts at TRACE level."""
    messages: list[str] = []
    enable_logging(add_sink=False)
    sink_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="TRACE",
        filter="objectware",
    )
    try:
        yield messages
    finally:
        logger.remove(sink_id)
        disable_logging()
