"""Console sinks."""

from __future__ import annotations

from .json_console import JsonConsoleSink, render_json

__all__ = ["JsonConsoleSink", "render_json"]
