"""
Command System.

Provides Command pattern infrastructure:
- Command / UndoableCommand / NoCommand: the command contract
- ActionCommand / ReversibleActionCommand: bind commands to receiver methods
- MacroCommand: ordered group of commands executed as one
- Invoker: triggers a command, undoes the last one (single level)
- UndoHistory: the invoker's one-slot history
- CommandQueue: FIFO batch execution
"""
from .base import Command, UndoableCommand, NoCommand
from .errors import CommandError, CommandBindingError
from .actions import ActionCommand, ReversibleActionCommand
from .macro import MacroCommand
from .history import UndoHistory
from .invoker import Invoker
from .queue import CommandQueue

__all__ = [
    # Contract
    "Command",
    "UndoableCommand",
    "NoCommand",
    # Errors
    "CommandError",
    "CommandBindingError",
    # Receiver adapters
    "ActionCommand",
    "ReversibleActionCommand",
    # Composition and execution
    "MacroCommand",
    "UndoHistory",
    "Invoker",
    "CommandQueue",
]
