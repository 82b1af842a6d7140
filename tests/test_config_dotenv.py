from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_entry import cli as cli_module
from lib_log_entry import config as log_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values into the process environment."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_ENTRY_STREAM=stdout\n")
    monkeypatch.chdir(nested)

    try:
        loaded = log_config.enable_dotenv()

        assert loaded == env_file.resolve()
        assert os.environ["LOG_ENTRY_STREAM"] == "stdout"
        assert log_config.ConsoleSettings.from_env().stream == "stdout"
    finally:
        os.environ.pop("LOG_ENTRY_STREAM", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_ENTRY_STREAM=stdout\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_ENTRY_STREAM", "stderr")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_ENTRY_STREAM"] == "stderr"


def test_enable_dotenv_loads_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("LOG_ENTRY_SORT_KEYS=0\n")
    monkeypatch.chdir(tmp_path)

    try:
        first = log_config.enable_dotenv()
        (tmp_path / ".env").write_text("LOG_ENTRY_SORT_KEYS=1\n")
        second = log_config.enable_dotenv()

        assert first == second
        assert os.environ["LOG_ENTRY_SORT_KEYS"] == "0"
    finally:
        os.environ.pop("LOG_ENTRY_SORT_KEYS", None)


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (None, None, False),
        (None, "1", True),
        (None, "off", False),
        (True, None, True),
        (False, "yes", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_console_settings_defaults() -> None:
    assert log_config.ConsoleSettings.from_env({}) == log_config.ConsoleSettings()


def test_console_settings_reject_bad_flag() -> None:
    with pytest.raises(ValueError, match="LOG_ENTRY_NO_COLOR"):
        log_config.ConsoleSettings.from_env({"LOG_ENTRY_NO_COLOR": "sometimes"})


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
