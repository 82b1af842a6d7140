"""Entry builder accumulating fields and emitting one entry per leveled call.

Purpose
-------
Give host code a small chained API to stage context (fields, exception
details) and then emit a structured entry through an injected sink.

Contents
--------
* :func:`assemble_entry` – merge required keys with staged fields.
* :class:`EntryBuilder` – the stateful builder used by applications.

System Role
-----------
Application-layer core. It depends only on :class:`SinkPort` and
:class:`ClockPort`; concrete defaults come from :mod:`lib_log_entry.lib_log_entry`
when the caller supplies none.

Lifecycle
---------
Staged fields persist across calls so context added once applies to every
later entry. Exception-derived fields attach to exactly one emission: they
are purged after ``flush`` returns or raises. A single builder must not be
shared between threads without external locking.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from lib_log_entry.application.ports import ClockPort, SinkPort
from lib_log_entry.domain import EXCEPTION_FIELDS, ExceptionDetails, LogLevel, ensure_not_reserved
from lib_log_entry.domain.fields import LEVEL, MESSAGE, NAME, TIMESTAMP

logger = logging.getLogger(__name__)


def assemble_entry(
    *,
    message: str,
    level: LogLevel,
    name: str,
    timestamp: datetime,
    fields: Mapping[str, Any],
) -> Mapping[str, Any]:
    """Return the read-only entry mapping handed to sinks.

    ``name``, ``level`` and ``timestamp`` can never be staged. ``message`` can,
    but the per-call message always wins over a staged one; the shadowed value
    is reported on the module logger at debug level.

    Examples
    --------
    >>> from datetime import timezone
    >>> entry = assemble_entry(
    ...     message="ok",
    ...     level=LogLevel.INFO,
    ...     name="svc",
    ...     timestamp=datetime(2025, 1, 1, tzinfo=timezone.utc),
    ...     fields={"retries": 3},
    ... )
    >>> sorted(entry)
    ['level', 'message', 'name', 'retries', 'timestamp']
    """

    data: dict[str, Any] = {
        MESSAGE: message,
        LEVEL: level.severity,
        NAME: name,
        TIMESTAMP: timestamp,
    }
    if MESSAGE in fields:
        logger.debug("Staged %r field of %s is shadowed by the call message", MESSAGE, name)
    data.update((key, value) for key, value in fields.items() if key not in data)
    return MappingProxyType(data)


class EntryBuilder:
    """Stage fields and emit structured log entries to a sink.

    Parameters
    ----------
    name:
        Logical source of the entries (module, class, request handler).
        Fixed for the builder's lifetime.
    sink:
        Destination implementing :class:`SinkPort`. Defaults to the JSON
        console sink configured from the environment.
    clock:
        Source of emission timestamps. Defaults to the system UTC clock.

    Examples
    --------
    >>> from datetime import timezone
    >>> class Collect:
    ...     def __init__(self):
    ...         self.entries = []
    ...     def flush(self, entry):
    ...         self.entries.append(dict(entry))
    >>> class Fixed:
    ...     def now(self):
    ...         return datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> sink = Collect()
    >>> EntryBuilder("svc", sink=sink, clock=Fixed()).with_field("retries", 3).warning("slow response")
    >>> sink.entries[0]["level"], sink.entries[0]["retries"]
    ('warning', 3)
    """

    def __init__(self, name: str, *, sink: SinkPort | None = None, clock: ClockPort | None = None) -> None:
        if not name or not name.strip():
            raise ValueError("name must not be empty")
        if sink is None or clock is None:
            from lib_log_entry.lib_log_entry import default_sink, system_clock

            sink = sink if sink is not None else default_sink()
            clock = clock if clock is not None else system_clock()
        self._name = name
        self._sink = sink
        self._clock = clock
        self._level: LogLevel | None = None
        self._fields: dict[str, Any] = {}

    @property
    def name(self) -> str:
        """Return the name stamped on every entry."""

        return self._name

    @property
    def level(self) -> LogLevel | None:
        """Return the level of the most recent emission, ``None`` before the first."""

        return self._level

    @property
    def fields(self) -> Mapping[str, Any]:
        """Return a read-only view of the currently staged fields."""

        return MappingProxyType(self._fields)

    @property
    def sink(self) -> SinkPort:
        return self._sink

    def with_field(self, key: str, value: Any) -> "EntryBuilder":
        """Stage ``key`` → ``value`` for this and later entries.

        Raises
        ------
        ReservedFieldError
            If ``key`` is one of the names the entry manages itself.
        """

        self._fields[ensure_not_reserved(key)] = value
        return self

    def with_fields(self, fields: Mapping[str, Any]) -> "EntryBuilder":
        """Stage every pair of ``fields`` in iteration order.

        Stops at the first reserved name; pairs staged before it are kept.
        """

        for key, value in fields.items():
            self.with_field(key, value)
        return self

    def with_exception(self, error: BaseException) -> "EntryBuilder":
        """Stage the root cause of ``error`` for the next entry only.

        Wrapped exceptions (``raise Outer(...) from inner``) are unwrapped to
        the innermost cause; messages of the wrapping layers are not recorded.
        """

        self._fields.update(ExceptionDetails.from_exception(error).to_fields())
        return self

    def debug(self, message: str) -> None:
        """Emit a ``debug`` entry."""
        self._emit(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        """Emit an ``info`` entry."""
        self._emit(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        """Emit a ``warning`` entry."""
        self._emit(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        """Emit an ``error`` entry."""
        self._emit(LogLevel.ERROR, message)

    def panic(self, message: str) -> None:
        """Emit a ``panic`` entry."""
        self._emit(LogLevel.PANIC, message)

    def log(self, level: LogLevel | str, message: str) -> None:
        """Emit an entry at ``level`` given as enum or case-insensitive name."""

        resolved = level if isinstance(level, LogLevel) else LogLevel.from_name(level)
        self._emit(resolved, message)

    def _emit(self, level: LogLevel, message: str) -> None:
        self._level = level
        self._write(level, message)

    def _write(self, level: LogLevel, message: str) -> None:
        """Assemble the entry, hand it to the sink, then drop exception fields.

        The exception fields are purged even when the sink raises, so a failed
        emission never leaks its exception context into the next entry. The
        sink's exception still propagates unchanged.
        """

        entry = assemble_entry(
            message=message,
            level=level,
            name=self._name,
            timestamp=self._clock.now(),
            fields=self._fields,
        )
        try:
            self._sink.flush(entry)
        finally:
            for key in EXCEPTION_FIELDS:
                self._fields.pop(key, None)

    def __repr__(self) -> str:
        return f"EntryBuilder(name={self._name!r}, fields={sorted(self._fields)!r})"


__all__ = ["EntryBuilder", "assemble_entry"]
