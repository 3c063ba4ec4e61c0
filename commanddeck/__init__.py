"""
commanddeck - Command execution framework

Executable commands, macro commands, a FIFO command queue and an invoker
with single-level undo, plus reference smart-home receivers.
"""

# Core systems
from commanddeck.core.config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    LoggingSettings,
    DemoSettings,
)
from commanddeck.core.events import Signal
from commanddeck.core.logging import setup_logging

# Commands
from commanddeck.core.commands import (
    Command,
    UndoableCommand,
    NoCommand,
    CommandError,
    CommandBindingError,
    ActionCommand,
    ReversibleActionCommand,
    MacroCommand,
    UndoHistory,
    Invoker,
    CommandQueue,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "LoggingSettings",
    "DemoSettings",
    "Signal",
    "setup_logging",

    # Commands
    "Command",
    "UndoableCommand",
    "NoCommand",
    "CommandError",
    "CommandBindingError",
    "ActionCommand",
    "ReversibleActionCommand",
    "MacroCommand",
    "UndoHistory",
    "Invoker",
    "CommandQueue",
]
