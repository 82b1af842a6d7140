"""Environment-driven configuration for the default sink and the CLI.

Purpose
-------
Translate ``LOG_ENTRY_*`` environment variables (optionally loaded from the
nearest ``.env`` file via :mod:`dotenv`) into the settings used to build the
default console sink.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle that enables ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – ``.env`` helpers.
* :class:`ConsoleSettings` – resolved console sink configuration.

System Role
-----------
Lives at the edge of the system: neither the builder nor the sink read the
environment themselves; :func:`lib_log_entry.default_sink` does it through
this module.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LIB_LOG_ENTRY_USE_DOTENV"
STREAM_ENV_VAR = "LOG_ENTRY_STREAM"
FORCE_COLOR_ENV_VAR = "LOG_ENTRY_FORCE_COLOR"
NO_COLOR_ENV_VAR = "LOG_ENTRY_NO_COLOR"
SORT_KEYS_ENV_VAR = "LOG_ENTRY_SORT_KEYS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}
_STREAMS = ("stderr", "stdout")

_DOTENV_LOADED: Path | None = None


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _env_bool({"FLAG": "yes"}, "FLAG", default=False)
    True
    >>> _env_bool({}, "FLAG", default=True)
    True
    >>> _env_bool({"FLAG": "maybe"}, "FLAG", default=True)
    Traceback (most recent call last):
    ...
    ValueError: FLAG must be a boolean flag, got 'maybe'
    """
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


@dataclass(slots=True, frozen=True)
class ConsoleSettings:
    """Settings for :class:`~lib_log_entry.adapters.JsonConsoleSink`."""

    stream: str = "stderr"
    force_color: bool = False
    no_color: bool = False
    sort_keys: bool = True

    def __post_init__(self) -> None:
        if self.stream not in _STREAMS:
            raise ValueError(f"{STREAM_ENV_VAR} must be one of {', '.join(_STREAMS)}, got {self.stream!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ConsoleSettings":
        """Read the settings from ``environ`` (defaults to :data:`os.environ`).

        Examples
        --------
        >>> ConsoleSettings.from_env({"LOG_ENTRY_STREAM": "STDOUT", "LOG_ENTRY_SORT_KEYS": "0"})
        ConsoleSettings(stream='stdout', force_color=False, no_color=False, sort_keys=False)
        """
        env = os.environ if environ is None else environ
        return cls(
            stream=(env.get(STREAM_ENV_VAR) or "stderr").strip().lower(),
            force_color=_env_bool(env, FORCE_COLOR_ENV_VAR, False),
            no_color=_env_bool(env, NO_COLOR_ENV_VAR, False),
            sort_keys=_env_bool(env, SORT_KEYS_ENV_VAR, True),
        )


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins over the :data:`DOTENV_ENV_VAR` toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="on")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` (searching upwards from the working directory).

    Existing environment variables keep precedence. The file is loaded at
    most once per process; later calls return the same path.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    return path


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "ConsoleSettings",
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "SORT_KEYS_ENV_VAR",
    "STREAM_ENV_VAR",
    "enable_dotenv",
    "should_use_dotenv",
]
