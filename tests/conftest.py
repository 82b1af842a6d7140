from __future__ import annotations

from datetime import datetime, timedelta, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_entry.adapters.capture import CaptureSink
from lib_log_entry.application.entry_builder import EntryBuilder

FIXED_NOW = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock returning ``start`` and advancing by ``step`` on every call."""

    def __init__(self, start: datetime = FIXED_NOW, step: timedelta = timedelta(0)) -> None:
        self.current = start
        self.step = step
        self.calls = 0

    def now(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def capture_sink() -> CaptureSink:
    return CaptureSink()


@pytest.fixture
def builder(capture_sink: CaptureSink, fixed_clock: FixedClock) -> EntryBuilder:
    return EntryBuilder("svc", sink=capture_sink, clock=fixed_clock)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=240, color_system=None)


@pytest.fixture(autouse=True)
def _isolate_log_entry_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_ENTRY_STREAM",
        "LOG_ENTRY_FORCE_COLOR",
        "LOG_ENTRY_NO_COLOR",
        "LOG_ENTRY_SORT_KEYS",
        "LIB_LOG_ENTRY_USE_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)
