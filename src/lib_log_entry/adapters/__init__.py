"""Concrete sink and clock adapters."""

from __future__ import annotations

from .capture import CaptureSink
from .clock import SystemClock
from .console import JsonConsoleSink, render_json
from .fan_out import FanOutSink
from .stdlib_logging import StdlibLoggingSink

__all__ = [
    "CaptureSink",
    "FanOutSink",
    "JsonConsoleSink",
    "StdlibLoggingSink",
    "SystemClock",
    "render_json",
]
