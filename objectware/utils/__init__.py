"""
Objectware utility modules.

This package provides shared utilities used across the Objectware codebase:
- Logging (loguru, disabled until the application opts in)
- Callback binding (context argument and arity fitting)
"""

# Logger
from .logger import (
    configure_from_env,
    disable_logging,
    enable_logging,
    get_log_level,
    is_debug_enabled,
    logger,
)

# Callbacks
from .callbacks import (
    bind_callback,
    positional_arity,
)

__all__ = [
    # Logger
    "configure_from_env",
    "disable_logging",
    "enable_logging",
    "get_log_level",
    "is_debug_enabled",
    "logger",
    # Callbacks
    "bind_callback",
    "positional_arity",
]
