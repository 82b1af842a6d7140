"""Sink forwarding entries to the stdlib :mod:`logging` tree.

Purpose
-------
Let applications that already configure :mod:`logging` handlers route
builder entries through them instead of the console sink.

Contents
--------
* :func:`format_message` - render message plus staged fields as one line.
* :class:`StdlibLoggingSink` - concrete :class:`SinkPort` implementation.

System Role
-----------
Maps the entry ``level`` onto stdlib levels (``panic`` becomes ``CRITICAL``)
and attaches the non-required fields to the record as ``entry_fields`` so
structured formatters can pick them up.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from lib_log_entry.application.ports.sink import SinkPort
from lib_log_entry.domain.fields import LEVEL, MESSAGE, NAME, REQUIRED_FIELDS, TIMESTAMP
from lib_log_entry.domain.levels import LogLevel


def _entry_fields(entry: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in entry.items() if key not in REQUIRED_FIELDS}


def format_message(entry: Mapping[str, Any]) -> str:
    """Return ``message`` followed by sorted ``key=value`` pairs.

    Examples
    --------
    >>> format_message({"message": "slow response", "level": "warning", "retries": 3, "host": "a"})
    'slow response host=a retries=3'
    """

    fields = _entry_fields(entry)
    suffix = "" if not fields else " " + " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    return f"{entry.get(MESSAGE, '')}{suffix}"


class StdlibLoggingSink(SinkPort):
    """Emit entries as :class:`logging.LogRecord` objects.

    Parameters
    ----------
    logger:
        Target logger. When omitted, entries go to ``logging.getLogger(entry["name"])``.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger

    def flush(self, entry: Mapping[str, Any]) -> None:
        """Forward ``entry`` to the configured logger."""
        target = self._logger or logging.getLogger(str(entry.get(NAME, "")))
        level = LogLevel.from_name(str(entry[LEVEL])).to_python_level()
        target.log(
            level,
            format_message(entry),
            extra={
                "entry_name": entry.get(NAME),
                "entry_timestamp": entry.get(TIMESTAMP),
                "entry_fields": _entry_fields(entry),
            },
        )


__all__ = ["StdlibLoggingSink", "format_message"]
