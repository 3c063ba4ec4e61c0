"""
Command Errors.

Receiver failures are never wrapped: they propagate unchanged through
execute()/undo(). These types only cover misuse of the framework itself.
"""


class CommandError(Exception):
    """Base exception for command framework errors."""
    pass


class CommandBindingError(CommandError):
    """Raised when a command cannot bind to the requested receiver operation."""

    def __init__(self, receiver, action: str):
        self.receiver = receiver
        self.action = action
        super().__init__(
            f"{type(receiver).__name__} has no callable '{action}'"
        )
