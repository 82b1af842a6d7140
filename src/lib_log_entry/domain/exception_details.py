"""Root-cause resolution and decomposition of exceptions into entry fields.

Purpose
-------
Turn an arbitrary exception (possibly wrapping others via ``raise ... from``)
into the four exception-derived fields an entry may carry.

Contents
--------
* :func:`root_cause` – walk ``__cause__`` links to the innermost exception.
* :class:`ExceptionDetails` – immutable value object with :meth:`to_fields`.

System Role
-----------
Used by :meth:`EntryBuilder.with_exception`. Only the root cause is recorded;
messages added by wrapping layers are intentionally dropped.
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from typing import Any

from .fields import EXCEPTION_LINE_NUMBER, EXCEPTION_MESSAGE, EXCEPTION_STACK_TRACE, EXCEPTION_TYPE

logger = logging.getLogger(__name__)

NO_LINE_NUMBER = -1
#: Sentinel recorded when the exception carries no traceback.


def root_cause(error: BaseException) -> BaseException:
    """Return the innermost exception of the ``__cause__`` chain.

    A cause chain that loops back onto itself stops at the last exception not
    yet visited.

    Examples
    --------
    >>> inner = KeyError("missing")
    >>> outer = RuntimeError("wrapped")
    >>> outer.__cause__ = inner
    >>> root_cause(outer) is inner
    True
    >>> a, b = ValueError("a"), ValueError("b")
    >>> a.__cause__, b.__cause__ = b, a
    >>> root_cause(a) is b
    True
    """

    current = error
    seen = {id(current)}
    while True:
        cause = getattr(current, "__cause__", None)
        if cause is None:
            return current
        if id(cause) in seen:
            logger.debug("Cause chain of %s loops back onto itself; stopping at %s", type(error).__name__, type(current).__name__)
            return current
        seen.add(id(cause))
        current = cause


def _safe_message(error: BaseException) -> str:
    try:
        return str(error)
    except Exception:
        return f"<unprintable {type(error).__name__}>"


def _format_stack_trace(error: BaseException) -> str:
    tb = getattr(error, "__traceback__", None)
    if tb is None:
        return ""
    return "".join(traceback.format_exception(type(error), error, tb, chain=False))


def _line_number(error: BaseException) -> int:
    tb = getattr(error, "__traceback__", None)
    if tb is None:
        return NO_LINE_NUMBER
    frames = traceback.extract_tb(tb)
    if not frames or frames[-1].lineno is None:
        return NO_LINE_NUMBER
    return frames[-1].lineno


@dataclass(slots=True, frozen=True)
class ExceptionDetails:
    """Structured view of a single exception.

    Attributes
    ----------
    message:
        ``str(exception)``, or ``"<unprintable TypeName>"`` when that raises.
    stack_trace:
        Formatted traceback of this exception only, ``""`` when it was never raised.
    line_number:
        Line of the innermost traceback frame (where it was raised), or ``-1``.
    type_name:
        Concrete class name, e.g. ``"KeyError"``.
    """

    message: str
    stack_trace: str
    line_number: int
    type_name: str

    @classmethod
    def from_exception(cls, error: BaseException) -> "ExceptionDetails":
        """Describe the root cause of ``error``.

        Examples
        --------
        >>> details = ExceptionDetails.from_exception(ValueError("bad input"))
        >>> details.type_name, details.message, details.line_number, details.stack_trace
        ('ValueError', 'bad input', -1, '')
        """

        cause = root_cause(error)
        return cls(
            message=_safe_message(cause),
            stack_trace=_format_stack_trace(cause),
            line_number=_line_number(cause),
            type_name=type(cause).__name__,
        )

    def to_fields(self) -> dict[str, Any]:
        """Return the entry fields describing this exception."""

        return {
            EXCEPTION_MESSAGE: self.message,
            EXCEPTION_STACK_TRACE: self.stack_trace,
            EXCEPTION_LINE_NUMBER: self.line_number,
            EXCEPTION_TYPE: self.type_name,
        }


__all__ = ["ExceptionDetails", "NO_LINE_NUMBER", "root_cause"]
