"""
Command Pattern - Base Interfaces.

Provides:
- Command: unit of work bound to a receiver at construction
- UndoableCommand: Command that can reverse its own execute()
- NoCommand: null-object command used as the empty invoker slot
"""
from abc import ABC, abstractmethod


class Command(ABC):
    """
    A receiver-bound operation.

    Concrete commands take their receiver and any parameters in __init__
    and never change them afterwards. execute() performs the same receiver
    call(s) every time it is invoked.

    Example:
        class PrintCommand(Command):
            def __init__(self, printer, document):
                self._printer = printer
                self._document = document

            def execute(self):
                self._printer.print_document(self._document)
    """

    @property
    def description(self) -> str:
        """
        Human-readable description for logs.

        Returns:
            Description string (default: class name)
        """
        return self.__class__.__name__

    @abstractmethod
    def execute(self) -> None:
        """
        Perform the bound action on the bound receiver.

        Receiver failures propagate to the caller unchanged.
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.description}>"


class UndoableCommand(Command):
    """
    Command that can reverse its last execute().

    The inverse is fixed at construction ("turn on" always undoes to
    "turn off"), so repeated execute/undo pairs stay well-defined.
    Nothing verifies that undo() really is the inverse; that is on the
    command author.

    Example:
        class LightOnCommand(UndoableCommand):
            def __init__(self, light):
                self._light = light

            def execute(self):
                self._light.turn_on()

            def undo(self):
                self._light.turn_off()
    """

    @abstractmethod
    def undo(self) -> None:
        """
        Reverse the command.

        Must restore receiver state to what it was before execute().
        """
        pass


class NoCommand(UndoableCommand):
    """Null object: executing or undoing it does nothing."""

    @property
    def description(self) -> str:
        return "No command"

    def execute(self) -> None:
        pass

    def undo(self) -> None:
        pass
