"""Facade wiring the entry builder to its default collaborators.

Purpose
-------
Expose a small, ergonomic API for host applications: obtain a builder, build
the default sink from the environment, and run a demonstration of every level.

Contents
--------
* Composition helpers: :func:`default_sink`, :func:`system_clock`,
  :func:`get_builder`.
* Tooling: :func:`summary_info`, :func:`logdemo`.

System Role
-----------
The single composition point between the application layer
(:class:`EntryBuilder`) and concrete adapters; :mod:`lib_log_entry.config`
supplies the environment-derived settings.
"""

from __future__ import annotations

from typing import Any, Iterable

from . import config
from .adapters import CaptureSink, FanOutSink, JsonConsoleSink, SystemClock
from .application.entry_builder import EntryBuilder
from .application.ports import ClockPort, SinkPort
from .domain import LogLevel


def default_sink(settings: config.ConsoleSettings | None = None) -> JsonConsoleSink:
    """Return the JSON console sink used when a builder gets no sink.

    Parameters
    ----------
    settings:
        Explicit console settings; ``None`` reads ``LOG_ENTRY_*`` variables.

    Raises
    ------
    ValueError
        When an environment variable holds an unsupported value.
    """

    resolved = settings if settings is not None else config.ConsoleSettings.from_env()
    return JsonConsoleSink(
        stream=resolved.stream,
        force_color=resolved.force_color,
        no_color=resolved.no_color,
        sort_keys=resolved.sort_keys,
    )


def system_clock() -> ClockPort:
    """Return the UTC wall clock used to stamp entries."""

    return SystemClock()


def get_builder(name: str, *, sink: SinkPort | None = None, clock: ClockPort | None = None) -> EntryBuilder:
    """Return a fresh :class:`EntryBuilder` for ``name``.

    Examples
    --------
    >>> sink = CaptureSink()
    >>> builder = get_builder("checkout", sink=sink)
    >>> builder.with_fields({"order_id": 42}).info("order placed")
    >>> sink.last["name"], sink.last["order_id"]
    ('checkout', 42)
    """

    return EntryBuilder(name, sink=sink, clock=clock)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def _lookup_token(credentials: dict[str, str]) -> str:
    try:
        return credentials["api_token"]
    except KeyError as exc:
        raise LookupError("credentials incomplete") from exc


def _demo_failure() -> RuntimeError:
    """Return a raised ``RuntimeError`` → ``LookupError`` → ``KeyError`` chain."""

    try:
        _lookup_token({})
    except LookupError as exc:
        try:
            raise RuntimeError("request aborted") from exc
        except RuntimeError as wrapped:
            return wrapped
    return RuntimeError("request aborted")


def logdemo(
    *,
    name: str = "logdemo",
    sink: SinkPort | None = None,
    levels: Iterable[LogLevel | str] | None = None,
) -> dict[str, Any]:
    """Emit one sample entry per level plus an exception-chain sample.

    Parameters
    ----------
    name:
        Builder name stamped on the sample entries.
    sink:
        Destination for the entries; defaults to :func:`default_sink`.
    levels:
        Subset of levels to demonstrate (enum members or names). Defaults to
        all five.

    Returns
    -------
    dict[str, Any]
        ``name`` and the list of emitted ``entries`` as plain dictionaries.

    Examples
    --------
    >>> result = logdemo(sink=CaptureSink(), levels=["info"])
    >>> [entry["level"] for entry in result["entries"]]
    ['info', 'error']
    >>> result["entries"][-1]["exception_type"]
    'KeyError'
    """

    selected = [level if isinstance(level, LogLevel) else LogLevel.from_name(level) for level in (levels or list(LogLevel))]
    capture = CaptureSink()
    target = FanOutSink([sink if sink is not None else default_sink(), capture])
    builder = EntryBuilder(name, sink=target).with_field("demo", True)

    for level in selected:
        builder.log(level, f"{level.severity.capitalize()} message")
    builder.with_exception(_demo_failure()).error("Request failed")

    return {"name": name, "entries": capture.entries}


__all__ = [
    "default_sink",
    "get_builder",
    "logdemo",
    "summary_info",
    "system_clock",
]
