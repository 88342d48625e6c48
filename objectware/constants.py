"""Shared constants and helpers for Objectware.

Centralizes the environment variable names read by the logging setup, the
UNDEFINED sentinel for absent arguments, and the timezone-aware datetime
helper used by the error types.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)

# Set to "true" to turn on library logging at DEBUG level on import.
DEBUG_ENV_VAR: str = "OBJECTWARE_DEBUG"

# Overrides the level passed to enable_logging() when no level is given.
LOG_LEVEL_ENV_VAR: str = "OBJECTWARE_LOG_LEVEL"

DEFAULT_LOG_LEVEL: str = "INFO"

# Loguru name used for logger.enable()/logger.disable().
LOGGER_NAME: str = "objectware"


class _Undefined:
    """Sentinel for an argument that was not supplied at all.

    Distinct from None, which callers pass explicitly. Falsy, and a
    singleton that survives copy and pickle.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()
