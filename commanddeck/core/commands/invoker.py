"""
Invoker - triggers the current command and undoes the last one.

The invoker never talks to receivers. It only calls execute()/undo() on
whatever command it holds, so any command works with any invoker.
"""
from typing import Optional

from loguru import logger

from ..events import Signal
from .base import Command, NoCommand, UndoableCommand
from .history import UndoHistory


class Invoker:
    """
    Holds a current command and a one-slot undo history.

    Features:
    - trigger(): execute the current command and remember it for undo
    - undo_last(): undo the remembered command once
    - Signals for UI binding (can_undo_changed, state_changed)

    Usage:
        remote = Invoker()
        remote.set_command(LightOnCommand(light))
        remote.trigger()     # light on
        remote.undo_last()   # light off
        remote.undo_last()   # nothing to undo, returns False

    Not thread-safe: callers sharing an invoker across threads must
    serialize access themselves.
    """

    def __init__(self):
        self._command: Command = NoCommand()
        self._history = UndoHistory()

        self.can_undo_changed = Signal("CanUndoChanged")
        self.state_changed = Signal("InvokerStateChanged")

        # Track previous state for signal emission
        self._last_can_undo = False

    @property
    def command(self) -> Command:
        """The current command (NoCommand when nothing is set)."""
        return self._command

    @property
    def last_command(self) -> Optional[Command]:
        """The command undo_last() would act on, or None."""
        return self._history.last

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    def set_command(self, command: Optional[Command]) -> None:
        """
        Replace the current command.

        Args:
            command: Command to bind, or None to clear the slot

        Raises:
            TypeError: If command is not a Command
        """
        if command is None:
            command = NoCommand()
        elif not isinstance(command, Command):
            raise TypeError(f"Expected a Command, got {type(command).__name__}")
        self._command = command
        logger.debug(f"Command set: {command.description}")

    def trigger(self) -> bool:
        """
        Execute the current command and record it as undoable.

        Returns:
            True if a command was executed, False if no command is set

        Raises:
            Whatever the command's execute() raises; history is unchanged.
        """
        command = self._command
        if isinstance(command, NoCommand):
            logger.info("No command set")
            return False

        try:
            command.execute()
        except Exception as e:
            logger.error(f"Command execution failed: {command.description}: {e}")
            raise

        self._history.record(command)
        logger.debug(f"Executed: {command.description}")
        self._emit_state_changes()
        return True

    def undo_last(self) -> bool:
        """
        Undo the most recently triggered command, once.

        Returns:
            True if undo was performed, False if there was nothing to undo

        Raises:
            Whatever the command's undo() raises; history is retained.
        """
        command = self._history.last
        if command is None:
            logger.info("Nothing to undo")
            return False

        if not isinstance(command, UndoableCommand):
            logger.warning(f"Last command does not support undo: {command.description}")
            return False

        try:
            command.undo()
        except Exception as e:
            logger.error(f"Undo failed: {command.description}: {e}")
            raise

        self._history.clear()
        logger.debug(f"Undone: {command.description}")
        self._emit_state_changes()
        return True

    def _emit_state_changes(self) -> None:
        """Emit can_undo_changed on flips, state_changed always."""
        current_can_undo = self.can_undo
        if current_can_undo != self._last_can_undo:
            self._last_can_undo = current_can_undo
            self.can_undo_changed.emit(current_can_undo)

        self.state_changed.emit()
