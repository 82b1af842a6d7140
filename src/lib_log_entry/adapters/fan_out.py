"""Sink forwarding each entry to several sinks in order."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from lib_log_entry.application.ports.sink import SinkPort


class FanOutSink(SinkPort):
    """Flush entries to every wrapped sink, stopping at the first failure.

    Examples
    --------
    >>> from lib_log_entry.adapters.capture import CaptureSink
    >>> first, second = CaptureSink(), CaptureSink()
    >>> FanOutSink([first, second]).flush({"message": "hi"})
    >>> len(first), len(second)
    (1, 1)
    """

    def __init__(self, sinks: Iterable[SinkPort]) -> None:
        self._sinks = tuple(sinks)
        if not self._sinks:
            raise ValueError("FanOutSink requires at least one sink")

    @property
    def sinks(self) -> tuple[SinkPort, ...]:
        return self._sinks

    def flush(self, entry: Mapping[str, Any]) -> None:
        for sink in self._sinks:
            sink.flush(entry)


__all__ = ["FanOutSink"]
