"""Log level abstraction for structured log entries.

Purpose
-------
Enumerate the five severities a :class:`~lib_log_entry.application.entry_builder.EntryBuilder`
can emit and provide the conversions adapters need.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_ICON_TABLE`` constant mapping levels to console glyphs.

System Role
-----------
The builder stamps ``LogLevel.severity`` into every entry; sinks use
:meth:`LogLevel.to_python_level` and :attr:`LogLevel.icon` when forwarding or
rendering entries.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated severities supported by the entry builder."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    PANIC = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name written into entries.

        Examples
        --------
        >>> LogLevel.PANIC.severity
        'panic'
        """

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level.

        ``PANIC`` has no stdlib counterpart and maps to ``logging.CRITICAL``.

        Examples
        --------
        >>> LogLevel.PANIC.to_python_level() == logging.CRITICAL
        True
        """

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Parse ``name`` case-insensitively into a :class:`LogLevel`.

        Examples
        --------
        >>> LogLevel.from_name(" Warning ") is LogLevel.WARNING
        True
        """
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


_ICON_TABLE = {
    LogLevel.DEBUG: "🐞",
    LogLevel.INFO: "ℹ",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.PANIC: "☠",
}
# Console glyphs displayed by the console sink per log level.

_PYTHON_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.PANIC: logging.CRITICAL,
}


__all__ = ["LogLevel"]
