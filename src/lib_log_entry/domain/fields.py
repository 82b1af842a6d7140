"""Reserved field names and the validation error raised when they are staged.

Purpose
-------
Keep the list of names an entry owns in one place so the builder can reject
them with a lookup instead of a branch chain.

Contents
--------
* ``REQUIRED_FIELDS`` / ``CORE_RESERVED_FIELDS`` / ``EXCEPTION_FIELDS`` constants.
* :class:`ReservedFieldError` raised by :func:`ensure_not_reserved`.

System Role
-----------
Domain policy consulted by :meth:`EntryBuilder.with_field` before a value is
staged, so a misused name never reaches a sink.
"""

from __future__ import annotations

from typing import Mapping

MESSAGE = "message"
LEVEL = "level"
NAME = "name"
TIMESTAMP = "timestamp"

EXCEPTION_MESSAGE = "exception_message"
EXCEPTION_STACK_TRACE = "exception_stack_trace"
EXCEPTION_LINE_NUMBER = "exception_line_number"
EXCEPTION_TYPE = "exception_type"

REQUIRED_FIELDS: tuple[str, ...] = (MESSAGE, LEVEL, NAME, TIMESTAMP)
#: Keys every entry carries, in the order they are assembled.

CORE_RESERVED_FIELDS: frozenset[str] = frozenset({NAME, LEVEL, TIMESTAMP})
EXCEPTION_FIELDS: tuple[str, ...] = (
    EXCEPTION_MESSAGE,
    EXCEPTION_STACK_TRACE,
    EXCEPTION_LINE_NUMBER,
    EXCEPTION_TYPE,
)

_CORE_HINT = "{name!r} is a reserved field name set by the log entry itself"
_EXCEPTION_HINT = "{name!r} is reserved for exception details; use with_exception() instead"

_RESERVED_MESSAGES: Mapping[str, str] = {
    **{name: _CORE_HINT for name in CORE_RESERVED_FIELDS},
    **{name: _EXCEPTION_HINT for name in EXCEPTION_FIELDS},
}


class ReservedFieldError(ValueError):
    """Raised when a caller stages a field name the entry manages itself.

    Attributes
    ----------
    field_name:
        The reserved key that triggered the error.
    exception_field:
        ``True`` when the key belongs to the exception-derived set.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        self.exception_field = field_name in EXCEPTION_FIELDS
        super().__init__(_RESERVED_MESSAGES[field_name].format(name=field_name))


def is_reserved(key: str) -> bool:
    """Return ``True`` when ``key`` may not be staged by callers.

    Examples
    --------
    >>> is_reserved("timestamp"), is_reserved("exception_type"), is_reserved("retries")
    (True, True, False)
    """

    return key in _RESERVED_MESSAGES


def ensure_not_reserved(key: str) -> str:
    """Return ``key`` unchanged or raise :class:`ReservedFieldError`.

    Examples
    --------
    >>> ensure_not_reserved("user_id")
    'user_id'
    >>> ensure_not_reserved("exception_message")
    Traceback (most recent call last):
    ...
    lib_log_entry.domain.fields.ReservedFieldError: 'exception_message' is reserved for exception details; use with_exception() instead
    """

    if key in _RESERVED_MESSAGES:
        raise ReservedFieldError(key)
    return key


__all__ = [
    "CORE_RESERVED_FIELDS",
    "EXCEPTION_FIELDS",
    "EXCEPTION_LINE_NUMBER",
    "EXCEPTION_MESSAGE",
    "EXCEPTION_STACK_TRACE",
    "EXCEPTION_TYPE",
    "LEVEL",
    "MESSAGE",
    "NAME",
    "REQUIRED_FIELDS",
    "ReservedFieldError",
    "TIMESTAMP",
    "ensure_not_reserved",
    "is_reserved",
]
