"""Rich-powered console sink writing one JSON document per entry.

Purpose
-------
Default destination used when an application constructs a builder without a
sink: entries are serialised to JSON and printed to the debug stream.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :func:`render_json` - deterministic JSON rendering of an entry.
* :class:`JsonConsoleSink` - :class:`SinkPort` implementation.

System Role
-----------
Fallback sink built by :func:`lib_log_entry.default_sink`; honours the
``LOG_ENTRY_*`` environment settings loaded by :mod:`lib_log_entry.config`.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Mapping, MutableMapping

from rich.console import Console

from lib_log_entry.application.ports.sink import SinkPort
from lib_log_entry.domain.fields import LEVEL
from lib_log_entry.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.PANIC: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def render_json(entry: Mapping[str, Any], *, sort_keys: bool = True) -> str:
    """Serialise ``entry`` to a single JSON line.

    Values JSON cannot encode natively are rendered as ISO 8601 (dates and
    datetimes) or ``str()``.

    Examples
    --------
    >>> from datetime import timezone
    >>> render_json({"message": "hi", "timestamp": datetime(2025, 1, 1, tzinfo=timezone.utc)})
    '{"message": "hi", "timestamp": "2025-01-01T00:00:00+00:00"}'
    """

    return json.dumps(dict(entry), default=_json_default, sort_keys=sort_keys, ensure_ascii=False)


class JsonConsoleSink(SinkPort):
    """Print entries as JSON lines using Rich with optional per-level colour."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        stream: str = "stderr",
        force_color: bool = False,
        no_color: bool = False,
        sort_keys: bool = True,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the sink with stream, colour, and style overrides."""
        if stream not in ("stderr", "stdout"):
            raise ValueError(f"stream must be 'stderr' or 'stdout', got {stream!r}")
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                stderr=stream == "stderr",
                force_terminal=True if force_color else None,
                no_color=no_color,
            )
        self._no_color = no_color
        self._sort_keys = sort_keys
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def flush(self, entry: Mapping[str, Any]) -> None:
        """Print ``entry`` as one JSON line.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=200)
        >>> JsonConsoleSink(console=console).flush({"message": "msg", "level": "info"})
        >>> console.export_text()
        '{"level": "info", "message": "msg"}\\n'
        """
        line = render_json(entry, sort_keys=self._sort_keys)
        self._console.print(line, style=self._style_for(entry), highlight=False, markup=False, emoji=False, soft_wrap=True)

    def _style_for(self, entry: Mapping[str, Any]) -> str:
        if self._no_color:
            return ""
        try:
            level = LogLevel.from_name(str(entry.get(LEVEL, "")))
        except ValueError:
            return ""
        return self._style_map.get(level, "")


__all__ = ["JsonConsoleSink", "render_json"]
