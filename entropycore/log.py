"""Level-based logging through per-level buffered streams."""

from __future__ import annotations

import enum
import inspect
import sys
import threading
from typing import Any

from entropycore.typeid import type_name_of

DELIMITER = "!EOM!"


class LogLevel(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    """Diagnostic messages."""
    INFO = 1
    """Informational messages."""
    WARNING = 2
    """Recoverable error."""
    ERROR = 3
    """Unrecoverable error."""


_LEVEL_NAMES = {
    LogLevel.DEBUG: "Debug",
    LogLevel.INFO: "Info",
    LogLevel.WARNING: "Warning",
    LogLevel.ERROR: "Error",
}


def _as_level(level: Any) -> LogLevel | None:
    try:
        return LogLevel(level)
    except (ValueError, TypeError):
        return None


def level_name(level: Any) -> str:
    """Return the display name of ``level``, or an empty string if it is unknown."""
    parsed = _as_level(level)
    return _LEVEL_NAMES[parsed] if parsed is not None else ""


def write(level: Any, msg: str) -> None:
    """Print one message tagged with its level to standard output."""
    print(f"[{level_name(level)}] {msg}", file=sys.stdout, flush=True)


class LogStream:
    """Text stream that collects output and emits it as a message on sync.

    Text is accumulated until :meth:`sync` finds the message delimiter; the
    text before the last delimiter is then written at the stream's level
    and the buffer is emptied.
    """

    def __init__(self, level: LogLevel) -> None:
        self.level = LogLevel(level)
        self._parts: list[str] = []
        self._lock = threading.Lock()

    @property
    def pending(self) -> str:
        """Text written since the last emitted message."""
        with self._lock:
            return "".join(self._parts)

    def write(self, text: str) -> int:
        """Append ``text`` to the buffer and return its length."""
        text = str(text)
        with self._lock:
            self._parts.append(text)
        return len(text)

    def sync(self) -> None:
        """Emit the buffered message if it holds a delimiter."""
        with self._lock:
            buffered = "".join(self._parts)
            delimiter = buffered.rfind(DELIMITER)
            if delimiter < 0:
                return
            if delimiter < len(buffered) - 1:
                buffered = buffered[:delimiter]
            self._parts.clear()
        write(self.level, buffered)

    def flush(self) -> None:
        """Same as :meth:`sync`."""
        self.sync()


_STREAMS = tuple(LogStream(level) for level in LogLevel)


def get_stream(level: Any) -> LogStream | None:
    """Return the shared stream for ``level``, or None if the level is invalid."""
    parsed = _as_level(level)
    return _STREAMS[parsed] if parsed is not None else None


def _emit(stream: LogStream, prefix: str, msg: Any) -> None:
    stream.write(f"{prefix} - {msg}")
    stream.write(DELIMITER)
    stream.flush()


def _caller_location(depth: int = 2) -> tuple[str, int]:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>", 0
        return frame.f_code.co_name, frame.f_lineno
    finally:
        del frame


def log(level: Any, msg: Any, owner: Any) -> None:
    """Log ``msg`` prefixed by the owner's type name, the calling function and line."""
    stream = get_stream(level)
    if stream is None:
        return
    owner_type = owner if isinstance(owner, type) else type(owner)
    func, line = _caller_location()
    _emit(stream, f"{type_name_of(owner_type)}::{func}({line})", msg)


def log_func(level: Any, msg: Any) -> None:
    """Log ``msg`` prefixed by the calling function and line."""
    stream = get_stream(level)
    if stream is None:
        return
    func, line = _caller_location()
    _emit(stream, f"{func}({line})", msg)