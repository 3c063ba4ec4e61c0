"""
Macro Command - run an ordered group of commands as one.
"""
from typing import Iterable, Iterator, Tuple

from loguru import logger

from .base import Command


class MacroCommand(Command):
    """
    Executes a fixed, ordered sequence of commands.

    Children may be simple commands or other macros. The sequence is copied
    on construction and cannot change afterwards.

    There is no macro-level undo and no rollback: if a child raises, the
    children already executed stay executed and the rest are skipped.

    Example:
        party_on = MacroCommand(
            [LightOnCommand(light), TurnOnCommand(tv), SetVolumeCommand(stereo, 11)],
            "Party mode on",
        )
        remote.set_command(party_on)
        remote.trigger()
    """

    def __init__(self, commands: Iterable[Command], description: str = "Macro"):
        """
        Initialize macro command.

        Args:
            commands: Commands to execute, in order
            description: Description for this macro

        Raises:
            TypeError: If any element is not a Command
        """
        children = tuple(commands)
        for child in children:
            if not isinstance(child, Command):
                raise TypeError(
                    f"MacroCommand children must be Command instances, got {type(child).__name__}"
                )
        self._commands: Tuple[Command, ...] = children
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    @property
    def commands(self) -> Tuple[Command, ...]:
        return self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def execute(self) -> None:
        """Execute all sub-commands in order."""
        logger.debug(f"Executing macro '{self._description}' ({len(self._commands)} commands)")
        for cmd in self._commands:
            cmd.execute()
        logger.debug(f"Macro '{self._description}' complete")
