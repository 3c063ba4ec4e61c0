"""
Core - command framework and application infrastructure.

Provides:
- Command, UndoableCommand, NoCommand: the command contract
- MacroCommand, Invoker, UndoHistory, CommandQueue: composition and execution
- ConfigManager: configuration with persistence
- Signal: synchronous observer
- setup_logging: loguru sinks

Usage:
    from commanddeck.core import Invoker, CommandQueue, MacroCommand

    remote = Invoker()
    remote.set_command(MacroCommand([light_on, tv_on]))
    remote.trigger()
"""
from .config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    LoggingSettings,
    DemoSettings,
)
from .events import Signal
from .logging import setup_logging
from .commands import (
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

__all__ = [
    # Configuration
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "LoggingSettings",
    "DemoSettings",

    # Events and logging
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
