"""
Undo History - single-slot record of the last triggered command.

This is deliberately not a stack: only the most recent command can be
undone, and only once. There is no redo.
"""
from typing import Optional

from .base import Command, UndoableCommand


class UndoHistory:
    """
    Holds at most one command.

    record() overwrites whatever was there, so an older command is never
    reachable for undo once a newer one has been recorded.
    """

    def __init__(self):
        self._last: Optional[Command] = None

    @property
    def last(self) -> Optional[Command]:
        """The most recently recorded command, or None."""
        return self._last

    @property
    def is_empty(self) -> bool:
        return self._last is None

    @property
    def can_undo(self) -> bool:
        """True if the slot holds a command that supports undo."""
        return isinstance(self._last, UndoableCommand)

    def record(self, command: Command) -> None:
        self._last = command

    def clear(self) -> None:
        self._last = None

    def __repr__(self) -> str:
        return f"<UndoHistory last={self._last!r}>"
