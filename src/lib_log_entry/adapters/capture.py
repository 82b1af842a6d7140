"""In-memory sink retaining flushed entries.

Purpose
-------
Give tests and embedding applications a sink whose output can be inspected
directly instead of parsed back from a console.

Contents
--------
* :class:`CaptureSink` with optional bounded retention.

System Role
-----------
Used by the test-suite fixtures and by :func:`lib_log_entry.logdemo` to
return what was emitted.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterator, Mapping

from lib_log_entry.application.ports.sink import SinkPort


class CaptureSink(SinkPort):
    """Record every entry flushed to it, oldest first.

    Parameters
    ----------
    max_entries:
        Keep only the most recent ``max_entries`` entries; ``None`` keeps all.

    Examples
    --------
    >>> sink = CaptureSink(max_entries=2)
    >>> for message in ("a", "b", "c"):
    ...     sink.flush({"message": message})
    >>> [entry["message"] for entry in sink]
    ['b', 'c']
    """

    def __init__(self, *, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._entries: Deque[dict[str, Any]] = deque(maxlen=max_entries)

    def flush(self, entry: Mapping[str, Any]) -> None:
        """Store a plain-dict copy of ``entry``."""

        self._entries.append(dict(entry))

    @property
    def entries(self) -> list[dict[str, Any]]:
        """Return a copy of the recorded entries."""

        return [dict(entry) for entry in self._entries]

    @property
    def last(self) -> dict[str, Any]:
        """Return a copy of the most recent entry or raise :class:`LookupError` when empty."""

        if not self._entries:
            raise LookupError("no entries captured")
        return dict(self._entries[-1])

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["CaptureSink"]
