"""Sink port describing where assembled entries are delivered.

Purpose
-------
Define the single capability the entry builder depends on, so console,
in-memory, and stdlib-logging destinations plug in interchangeably.

Contents
--------
* :class:`SinkPort` – runtime-checkable protocol with one ``flush`` method.

System Role
-----------
Boundary between the builder (application layer) and adapters. The builder
calls ``flush`` synchronously and lets any exception it raises propagate.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Consume one fully assembled log entry."""

    def flush(self, entry: Mapping[str, Any]) -> None:
        """Deliver ``entry``; raising aborts the triggering log call."""


__all__ = ["SinkPort"]
