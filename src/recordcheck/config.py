"""Configuration utilities for RECORDCHECK.

This module centralizes constants and small helpers for application configuration.
"""

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "recordcheck"  # pragma: no mutate
ENV_PREFIX = "RECORDCHECK"  # pragma: no mutate

# Token format
SEPARATOR = "_"  # pragma: no mutate
NUMBER_MIN = -(2**63)
NUMBER_MAX = 2**63 - 1

# Flight recorder
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000
LOG_FILE_NAME = "latest.log"  # pragma: no mutate


def default_log_path() -> Path:
    """Return the default flight-recorder log path.

    The directory is the per-user log directory reported by `platformdirs`,
    created on first use.

    Returns:
        Path to ``latest.log`` inside the user log directory.
    """
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / LOG_FILE_NAME
