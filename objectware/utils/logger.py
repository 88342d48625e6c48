"""
Logging for Objectware.

Objectware is a library, so its loguru output is disabled on import and the
host application decides whether to see it:

- enable_logging() turns the ``objectware`` namespace back on, optionally
  adding a stderr sink at a given level
- OBJECTWARE_DEBUG=true does the same at DEBUG level when the package loads
- OBJECTWARE_LOG_LEVEL picks the level used when enable_logging() gets none

Messages are emitted with loguru's ``{}`` formatting.
"""

import os
import sys

from loguru import logger as loguru_logger

from objectware.constants import (
    DEBUG_ENV_VAR,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    LOGGER_NAME,
)

# Export loguru logger for direct use
logger = loguru_logger

_sink_id: int | None = None


# ============================================================================
# Environment Configuration
# ============================================================================


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(DEBUG_ENV_VAR, "").lower() == "true"


def get_log_level() -> str:
    """Get the configured log level name (upper-cased)."""
    if is_debug_enabled():
        return "DEBUG"
    return os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()


# ============================================================================
# Sink Management
# ============================================================================


def enable_logging(level: str | None = None, add_sink: bool = True) -> None:
    """
    Turn on Objectware log output.

    Args:
        level: Minimum level for the stderr sink. Defaults to get_log_level().
        add_sink: When False, only re-enables the namespace and leaves sink
            configuration to the application.
    """
    global _sink_id

    logger.enable(LOGGER_NAME)
    if not add_sink:
        return

    if _sink_id is not None:
        logger.remove(_sink_id)
    _sink_id = logger.add(
        sys.stderr,
        level=level or get_log_level(),
        filter=LOGGER_NAME,
    )


def disable_logging() -> None:
    """Silence Objectware log output and drop the sink added by enable_logging()."""
    global _sink_id

    logger.disable(LOGGER_NAME)
    if _sink_id is not None:
        logger.remove(_sink_id)
        _sink_id = None


def configure_from_env() -> None:
    """Apply the environment configuration. Called once on package import."""
    if is_debug_enabled():
        enable_logging()
    else:
        logger.disable(LOGGER_NAME)
