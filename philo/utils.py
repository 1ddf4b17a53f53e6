"""Timing helpers and output formatting."""

from __future__ import annotations

import time

RED = "\033[0;31m"
GREEN = "\033[0;32m"
LIGHT_BLUE = "\033[1;34m"
RST = "\033[0m"

_POLL_SECONDS = 0.0001


def get_time() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    start = get_time()
    while get_time() - start < ms:
        time.sleep(_POLL_SECONDS)


def format_action(timestamp: int, philo_id: int, message: str) -> str:
    """Return the coloured log line for a philosopher's action."""
    return f"{GREEN}{timestamp} {LIGHT_BLUE}{philo_id} {RST}{message}"


def format_death(timestamp: int, philo_id: int) -> str:
    """Return the log line announcing a philosopher's death."""
    return f"{timestamp} {philo_id} died"


def format_error(message: str) -> str:
    """Return an error message wrapped in red."""
    return f"{RED}{message}{RST}"