from __future__ import annotations

import json
from datetime import datetime, timezone
from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from lib_log_entry.adapters.console.json_console import JsonConsoleSink, render_json


def _entry(**extra: Any) -> dict[str, Any]:
    return {
        "message": "hello",
        "level": "info",
        "name": "tests",
        "timestamp": datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
        **extra,
    }


def test_console_sink_prints_one_json_line(record_console: Console) -> None:
    JsonConsoleSink(console=record_console).flush(_entry(foo="bar"))

    output = record_console.export_text()
    assert output.count("\n") == 1
    assert json.loads(output) == {
        "message": "hello",
        "level": "info",
        "name": "tests",
        "timestamp": "2025-09-23T12:00:00+00:00",
        "foo": "bar",
    }


def test_console_sink_does_not_wrap_long_entries(record_console: Console) -> None:
    JsonConsoleSink(console=record_console).flush(_entry(payload="x" * 1000))

    assert record_console.export_text().count("\n") == 1


def test_console_sink_leaves_markup_untouched(record_console: Console) -> None:
    JsonConsoleSink(console=record_console).flush(_entry(message="[bold]literal[/bold]"))

    assert "[bold]literal[/bold]" in record_console.export_text()


def test_console_sink_sort_keys_toggle(record_console: Console) -> None:
    JsonConsoleSink(console=record_console, sort_keys=False).flush({"b": 1, "a": 2})

    assert record_console.export_text().strip() == '{"b": 1, "a": 2}'


def test_console_sink_colours_by_level() -> None:
    console = Console(file=StringIO(), record=True, force_terminal=True, color_system="standard", width=240)
    JsonConsoleSink(console=console).flush(_entry(level="error"))

    styled = console.export_text(styles=True)
    assert "\x1b[" in styled


def test_console_sink_respects_no_color() -> None:
    console = Console(file=StringIO(), record=True, force_terminal=True, color_system="standard", width=240)
    JsonConsoleSink(console=console, no_color=True).flush(_entry(level="error"))

    assert "\x1b[" not in console.export_text(styles=True)


def test_console_sink_style_overrides_accept_level_names(record_console: Console) -> None:
    sink = JsonConsoleSink(console=record_console, styles={"panic": "magenta"})

    assert sink._style_for({"level": "panic"}) == "magenta"
    assert sink._style_for({"level": "unknown"}) == ""


def test_console_sink_rejects_unknown_stream() -> None:
    with pytest.raises(ValueError, match="stream"):
        JsonConsoleSink(stream="file")


@pytest.mark.parametrize(
    "stream, attribute",
    [("stderr", "err"), ("stdout", "out")],
)
def test_console_sink_targets_configured_stream(capsys: pytest.CaptureFixture[str], stream: str, attribute: str) -> None:
    JsonConsoleSink(stream=stream).flush(_entry())

    captured = capsys.readouterr()
    assert '"message": "hello"' in getattr(captured, attribute)


def test_render_json_falls_back_to_str_for_unknown_values() -> None:
    class Opaque:
        def __str__(self) -> str:
            return "opaque!"

    rendered = json.loads(render_json({"value": Opaque(), "tags": {"b", "a"}, "raw": b"bytes"}))

    assert rendered == {"raw": "bytes", "tags": ["a", "b"], "value": "opaque!"}
