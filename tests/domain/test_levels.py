from __future__ import annotations

import logging

import pytest

from lib_log_entry.domain.levels import LogLevel


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        ("PANIC", LogLevel.PANIC),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


@pytest.mark.parametrize("name", ["verbose", "critical", "fatal", ""])
def test_from_name_rejects_unknown_level(name: str) -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name(name)


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARNING, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.PANIC, logging.CRITICAL),
    ],
)
def test_to_python_level_returns_logging_constant(level: LogLevel, expected: int) -> None:
    assert level.to_python_level() == expected


@pytest.mark.parametrize(
    "level, icon",
    [
        (LogLevel.DEBUG, "🐞"),
        (LogLevel.INFO, "ℹ"),
        (LogLevel.WARNING, "⚠"),
        (LogLevel.ERROR, "✖"),
        (LogLevel.PANIC, "☠"),
    ],
)
def test_level_icon_table(level: LogLevel, icon: str) -> None:
    assert level.icon == icon


def test_level_set_is_exactly_five_severities() -> None:
    assert [level.severity for level in LogLevel] == ["debug", "info", "warning", "error", "panic"]
