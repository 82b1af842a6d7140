"""Domain values and policies used by the entry builder."""

from __future__ import annotations

from .exception_details import ExceptionDetails, root_cause
from .fields import EXCEPTION_FIELDS, REQUIRED_FIELDS, ReservedFieldError, ensure_not_reserved, is_reserved
from .levels import LogLevel

__all__ = [
    "EXCEPTION_FIELDS",
    "ExceptionDetails",
    "LogLevel",
    "REQUIRED_FIELDS",
    "ReservedFieldError",
    "ensure_not_reserved",
    "is_reserved",
    "root_cause",
]
