"""Click command group exposing metadata, demo, and one-shot emission commands.

Purpose
-------
Give operators a quick way to inspect the installed package, preview the
default console sink, and emit single entries from shell scripts.

Contents
--------
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv`` toggles.
* :func:`cli_info`, :func:`cli_logdemo`, :func:`cli_emit` - subcommands.
* :func:`main` - entry point delegating exit handling to ``lib_cli_exit_tools``.

System Role
-----------
Presentation layer only; every command goes through the public facade in
:mod:`lib_log_entry.lib_log_entry`.
"""

from __future__ import annotations

import json
import os
from typing import Any, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .domain import LogLevel, ReservedFieldError
from .lib_log_entry import default_sink, get_builder, logdemo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICES = [level.severity for level in LogLevel]
_STREAM_CHOICES = ["stderr", "stdout"]


def _parse_field(raw: str) -> tuple[str, Any]:
    """Split ``key=value``; values that parse as JSON keep their JSON type.

    Examples
    --------
    >>> _parse_field("retries=3")
    ('retries', 3)
    >>> _parse_field("host=db-1")
    ('host', 'db-1')
    """
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint="--field")
    try:
        return key.strip(), json.loads(value)
    except json.JSONDecodeError:
        return key.strip(), value


def _console_settings(stream: str | None) -> config_module.ConsoleSettings:
    settings = config_module.ConsoleSettings.from_env()
    if stream is None:
        return settings
    return config_module.ConsoleSettings(
        stream=stream,
        force_color=settings.force_color,
        no_color=settings.no_color,
        sort_keys=settings.sort_keys,
    )


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and printing the banner by default."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_info)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", default="logdemo", show_default=True, help="Builder name stamped on the entries.")
@click.option(
    "--level",
    "levels",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    multiple=True,
    help="Restrict the demo to these levels (repeatable). Defaults to all.",
)
@click.option("--stream", type=click.Choice(_STREAM_CHOICES), default=None, help="Console stream (overrides LOG_ENTRY_STREAM).")
def cli_logdemo(name: str, levels: tuple[str, ...], stream: str | None) -> None:
    """Emit one sample entry per level plus an exception-chain sample."""

    result = logdemo(name=name, sink=default_sink(_console_settings(stream)), levels=levels or None)
    click.echo(f"emitted {len(result['entries'])} entries for {result['name']!r}")


@cli.command("emit", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.option(
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default="info",
    show_default=True,
    help="Severity of the entry.",
)
@click.option("--name", default=__init__conf__.shell_command, show_default=True, help="Builder name stamped on the entry.")
@click.option("--field", "fields", multiple=True, metavar="KEY=VALUE", help="Additional field (repeatable).")
@click.option("--stream", type=click.Choice(_STREAM_CHOICES), default=None, help="Console stream (overrides LOG_ENTRY_STREAM).")
def cli_emit(message: str, level: str, name: str, fields: tuple[str, ...], stream: str | None) -> None:
    """Emit a single entry through the default console sink."""

    builder = get_builder(name, sink=default_sink(_console_settings(stream)))
    try:
        builder.with_fields(dict(_parse_field(raw) for raw in fields))
    except ReservedFieldError as exc:
        raise click.BadParameter(str(exc), param_hint="--field") from exc
    builder.log(level, message)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI with ``lib_cli_exit_tools`` exit-code handling.

    Parameters
    ----------
    argv:
        Optional argument list (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Reset the traceback preferences to their previous values afterwards.

    Returns
    -------
    int
        Process exit code.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
