"""Protocols the application layer depends on."""

from __future__ import annotations

from .sink import SinkPort
from .time import ClockPort

__all__ = ["ClockPort", "SinkPort"]
