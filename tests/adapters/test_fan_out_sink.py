from __future__ import annotations

from typing import Any, Mapping

import pytest

from lib_log_entry.adapters.capture import CaptureSink
from lib_log_entry.adapters.fan_out import FanOutSink


class _Failing:
    def flush(self, entry: Mapping[str, Any]) -> None:
        raise OSError("disk full")


def test_fan_out_delivers_to_every_sink_in_order() -> None:
    first, second = CaptureSink(), CaptureSink()
    FanOutSink([first, second]).flush({"message": "hi"})

    assert first.entries == second.entries == [{"message": "hi"}]


def test_fan_out_stops_at_first_failure() -> None:
    before, after = CaptureSink(), CaptureSink()

    with pytest.raises(OSError, match="disk full"):
        FanOutSink([before, _Failing(), after]).flush({"message": "hi"})

    assert len(before) == 1
    assert len(after) == 0


def test_fan_out_requires_sinks() -> None:
    with pytest.raises(ValueError):
        FanOutSink([])
