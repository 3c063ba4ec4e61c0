"""
Receiver Adapter Commands - bind a command to a named receiver method.

Provides the glue most concrete commands need:
- ActionCommand: call one receiver method with fixed arguments
- ReversibleActionCommand: same, plus a fixed inverse method for undo
"""
from typing import Any, Callable, Optional, Tuple

from .base import Command, UndoableCommand
from .errors import CommandBindingError


def _bind(receiver: Any, action: str) -> Callable:
    """Resolve receiver.action, failing at construction rather than execution."""
    method = getattr(receiver, action, None)
    if not callable(method):
        raise CommandBindingError(receiver, action)
    return method


class ActionCommand(Command):
    """
    Calls a single receiver method with arguments fixed at construction.

    Example:
        cmd = ActionCommand(printer, "print_document", "Report.pdf")
        queue.add_command(cmd)
    """

    def __init__(self, receiver: Any, action: str, *args: Any,
                 description: Optional[str] = None):
        """
        Initialize the command.

        Args:
            receiver: Object performing the work
            action: Name of the receiver method to call
            *args: Positional arguments passed on every execute()
            description: Description for logs (default: "<Receiver>.<action>")

        Raises:
            CommandBindingError: If the receiver has no callable named action
        """
        self._receiver = receiver
        self._action = action
        self._args: Tuple[Any, ...] = tuple(args)
        self._method = _bind(receiver, action)
        self._description = description

    @property
    def receiver(self) -> Any:
        return self._receiver

    @property
    def action(self) -> str:
        return self._action

    @property
    def args(self) -> Tuple[Any, ...]:
        return self._args

    @property
    def description(self) -> str:
        if self._description:
            return self._description
        return f"{type(self._receiver).__name__}.{self._action}"

    def execute(self) -> None:
        self._method(*self._args)


class ReversibleActionCommand(ActionCommand, UndoableCommand):
    """
    ActionCommand with a fixed inverse receiver method.

    Example:
        light_on = ReversibleActionCommand(light, "turn_on", "turn_off")
        light_on.execute()  # light.turn_on()
        light_on.undo()     # light.turn_off()
    """

    def __init__(self, receiver: Any, action: str, undo_action: str, *args: Any,
                 undo_args: Tuple[Any, ...] = (),
                 description: Optional[str] = None):
        """
        Initialize the command.

        Args:
            receiver: Object performing the work
            action: Receiver method called by execute()
            undo_action: Receiver method called by undo()
            *args: Positional arguments for action
            undo_args: Positional arguments for undo_action
            description: Description for logs

        Raises:
            CommandBindingError: If either method cannot be resolved
        """
        super().__init__(receiver, action, *args, description=description)
        self._undo_action = undo_action
        self._undo_args: Tuple[Any, ...] = tuple(undo_args)
        self._undo_method = _bind(receiver, undo_action)

    @property
    def undo_action(self) -> str:
        return self._undo_action

    @property
    def undo_args(self) -> Tuple[Any, ...]:
        return self._undo_args

    def undo(self) -> None:
        self._undo_method(*self._undo_args)
