"""Application layer: the entry builder and the ports it depends on."""

from __future__ import annotations

from .entry_builder import EntryBuilder, assemble_entry

__all__ = ["EntryBuilder", "assemble_entry"]
