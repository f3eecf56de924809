# fundraising/infrastructure/log.py
#
# Service log lines tagged with the configured service name and the time
# since the process started.
#
# Design decisions:
#   - The domain never logs. Only the HTTP shell (lifespan, access lines)
#     calls log().
#   - Info goes to stdout; warnings and errors go to stderr with the level
#     written after the prefix, so a container runtime can split the streams.
#   - The prefix name is read from Settings on every call, which keeps
#     get_settings.cache_clear() effective in tests.
from __future__ import annotations

import sys
import time
from typing import TextIO

from fundraising.infrastructure.config import get_settings

LEVELS = ("info", "warning", "error")

_start = time.monotonic()


def _elapsed() -> str:
    minutes, seconds = divmod(int(time.monotonic() - _start), 60)
    return f"{minutes:02d}:{seconds:02d}"


def log(message: str, level: str = "info") -> None:
    """Write "[<service> mm:ss] message"; non-info levels go to stderr as "LEVEL message"."""
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    stream: TextIO = sys.stdout if level == "info" else sys.stderr
    tag = "" if level == "info" else f"{level.upper()} "
    stream.write(f"[{get_settings().log_name} {_elapsed()}] {tag}{message}\n")
    stream.flush()


def level_for_status(status_code: int) -> str:
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"
