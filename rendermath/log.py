"""Thread-safe console logging prefixed with the caller's file and line."""

from __future__ import annotations

import inspect
import sys
import threading
from types import FrameType
from typing import NoReturn, Optional, Tuple

_lock = threading.Lock()

_RED = "\033[0;31m"
_RESET = "\033[0m"


def last_file(path: str) -> str:
    """Return the part of ``path`` after the last forward or back slash."""
    cut = max(path.rfind("/"), path.rfind("\\")) + 1
    return path[cut:]


def _caller() -> Optional[FrameType]:
    frame = inspect.currentframe()
    if frame is None or frame.f_back is None:
        return None
    return frame.f_back.f_back


def _location(frame: Optional[FrameType]) -> Tuple[str, int]:
    if frame is None:
        return "?", 0
    return last_file(frame.f_code.co_filename), frame.f_lineno


def _write(text: str) -> None:
    with _lock:
        sys.stdout.write(text)
        sys.stdout.flush()


def info(message: str) -> None:
    """Print an informational message."""
    name, line = _location(_caller())
    _write(f"{name}:{line} [info] {message}\n")


def warn(message: str) -> None:
    """Print a warning in red."""
    name, line = _location(_caller())
    _write(f"{_RED}{name}:{line} [warn] {message}{_RESET}\n")


def die(message: str) -> NoReturn:
    """Print a fatal error and exit with the caller's line number as status."""
    name, line = _location(_caller())
    _write(f"{_RED}{name}:{line} [fatal] {message}{_RESET}\n")
    raise SystemExit(line)