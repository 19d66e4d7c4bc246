"""Configuration utilities for SweetAlgy.

Settings are read from the environment on demand, never at import time,
so that tests can override them with ``monkeypatch.setenv``.
"""

import logging
import os

from sweetalgy.errors import SweetAlgyError

LOG_LEVEL_ENV_VAR = "SWEETALGY_LOG_LEVEL"  # pragma: no mutate


class InvalidLogLevelError(SweetAlgyError):
    """Raised when SWEETALGY_LOG_LEVEL names an unknown logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid log level in {LOG_LEVEL_ENV_VAR}: {value!r}")
        self.value = value


def get_log_level(default: int = logging.WARNING) -> int:
    """Get the console log level from the environment.

    Args:
        default: Level returned when `SWEETALGY_LOG_LEVEL` is unset or blank.

    Returns:
        The numeric logging level named by `SWEETALGY_LOG_LEVEL`.

    Raises:
        InvalidLogLevelError: If the variable names an unknown level.
    """
    if not (raw := os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()):
        return default
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise InvalidLogLevelError(raw)
    return level
