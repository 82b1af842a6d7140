"""Public package surface for building structured log entries.

Applications create an :class:`EntryBuilder` per unit of work, stage fields
and exception context on it, and emit entries through any object that
satisfies :class:`SinkPort`. Without an explicit sink the builder prints JSON
lines via :class:`JsonConsoleSink`.
"""

from __future__ import annotations

from .adapters import CaptureSink, FanOutSink, JsonConsoleSink, StdlibLoggingSink, SystemClock
from .application.entry_builder import EntryBuilder
from .application.ports import ClockPort, SinkPort
from .domain import ExceptionDetails, LogLevel, ReservedFieldError
from .lib_log_entry import default_sink, get_builder, logdemo, summary_info

__all__ = [
    "CaptureSink",
    "ClockPort",
    "EntryBuilder",
    "ExceptionDetails",
    "FanOutSink",
    "JsonConsoleSink",
    "LogLevel",
    "ReservedFieldError",
    "SinkPort",
    "StdlibLoggingSink",
    "SystemClock",
    "default_sink",
    "get_builder",
    "logdemo",
    "summary_info",
]
