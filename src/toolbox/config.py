"""Configuration utilities for toolbox.

This module centralizes small helpers and constants related to configuration.
Settings are read from the environment.
"""

import logging
import os

LOG_LEVEL_ENV_VAR = "TOOLBOX_LOG_LEVEL"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING


class InvalidLogLevelError(Exception):
    """Raised when TOOLBOX_LOG_LEVEL holds something that is not a log level."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid {LOG_LEVEL_ENV_VAR} value {value!r}: "
            "expected a level name (e.g. DEBUG) or a non-negative integer."
        )
        self.value = value


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The numeric level named by `TOOLBOX_LOG_LEVEL`, or `DEFAULT_LOG_LEVEL`
        when the variable is unset or empty. Level names are case-insensitive.

    Raises:
        InvalidLogLevelError: If the value is neither a level name nor a
            non-negative integer.
    """
    if not (raw := os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()):
        return DEFAULT_LOG_LEVEL
    if raw.isdecimal():
        return int(raw)
    if isinstance(lvl := logging.getLevelNamesMapping().get(raw.upper()), int):
        return lvl
    raise InvalidLogLevelError(raw)
