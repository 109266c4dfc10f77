"""
Package logger
==============

Diagnostics go to stderr (colored) and to a plain-text log file, so command
output on stdout stays machine-readable.

    log("Loaded 12 CSV rows")
    log("HEAD request failed", level="warning")

DATA_UTILITIES_LOG_DIR    directory of data-utilities.log (default: logs)
DATA_UTILITIES_LOG_LEVEL  lowest level shown on stderr (default: info)
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, NamedTuple

from colorama import Fore, Style, init

init()

# ============================================================
# PATHS & LEVELS
# ============================================================

LOG_DIR = Path(os.getenv("DATA_UTILITIES_LOG_DIR", "logs"))

LOG_FILE = LOG_DIR / "data-utilities.log"


class Level(NamedTuple):
    rank: int
    color: str


LEVELS = {
    "info": Level(10, Fore.CYAN),
    "warning": Level(30, Fore.YELLOW),
    "error": Level(40, Fore.LIGHTRED_EX),
}

# Unknown level names are written like info, under their own name
_FALLBACK = LEVELS["info"]

CONSOLE_LEVEL = os.getenv("DATA_UTILITIES_LOG_LEVEL", "info").lower()


def _shown_on_console(level: str) -> bool:
    threshold = LEVELS.get(CONSOLE_LEVEL, _FALLBACK).rank
    return LEVELS.get(level, _FALLBACK).rank >= threshold


def _console_line(message: str, level: str) -> str:
    color = LEVELS.get(level, _FALLBACK).color
    return f"{color}{Style.BRIGHT}{level.upper():<7}{Style.RESET_ALL} {message}"


# ============================================================
# PUBLIC API
# ============================================================


def console_log(message: str, level: str = "info") -> None:
    """
    Write one colored line to stderr, no file write.
    """
    if _shown_on_console(level):
        print(_console_line(message, level), file=sys.stderr)


def log(message: str, level: str = "info") -> None:
    """
    Log to stderr and append to LOG_FILE.

    :param level: info | warning | error
    """
    console_log(message, level)

    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().isoformat(timespec="seconds")
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(f"{stamp} {level.upper()} {message}\n")


class CustomLoggerAdapter:
    """logging.Logger-shaped front for `log`, for helpers taking a `logger`."""

    def __init__(self, log_func: Callable[[str, str], None]):
        self._log = log_func

    def info(self, message: str) -> None:
        self._log(message, "info")

    def warning(self, message: str) -> None:
        self._log(message, "warning")

    def error(self, message: str) -> None:
        self._log(message, "error")


def get_logger() -> CustomLoggerAdapter:
    # Late lookup of `log` so it can be patched
    return CustomLoggerAdapter(lambda message, level: log(message, level))
