"""Handler exports."""

from .entry_handler import EntryHandler

__all__ = ["EntryHandler"]
