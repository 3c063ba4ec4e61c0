"""
Command Queue - deferred FIFO batch execution.
"""
from collections import deque
from typing import Deque

from loguru import logger

from .base import Command


class CommandQueue:
    """
    Unbounded FIFO buffer of commands.

    Commands run in exactly the order they were added. The queue can be
    refilled and processed any number of times; each process_commands()
    call only runs what is pending at that moment plus anything added
    while it runs.

    Usage:
        queue = CommandQueue()
        queue.add_command(PrintCommand(printer, "Report.pdf"))
        queue.add_command(SendEmailCommand(email, "manager@company.com", "Weekly Report"))
        queue.process_commands()
        assert queue.is_empty()
    """

    def __init__(self):
        self._queue: Deque[Command] = deque()

    def add_command(self, command: Command) -> None:
        """
        Append a command to the tail of the queue.

        Raises:
            TypeError: If command is not a Command
        """
        if not isinstance(command, Command):
            raise TypeError(f"Expected a Command, got {type(command).__name__}")
        self._queue.append(command)
        logger.debug(f"Command added to queue. Queue size: {len(self._queue)}")

    def process_commands(self) -> int:
        """
        Execute queued commands head-first until the queue is empty.

        A command is removed before it runs. If it raises, the exception
        propagates and the commands behind it stay queued in order.

        Returns:
            Number of commands executed
        """
        if not self._queue:
            logger.debug("Command queue empty, nothing to process")
            return 0

        processed = 0
        while self._queue:
            command = self._queue.popleft()
            try:
                command.execute()
            except Exception as e:
                logger.error(
                    f"Queued command failed: {command.description}: {e} "
                    f"({len(self._queue)} still queued)"
                )
                raise
            processed += 1

        logger.debug(f"Queue processing complete: {processed} commands")
        return processed

    def clear(self) -> int:
        """
        Drop all pending commands without executing them.

        Returns:
            Number of commands discarded
        """
        dropped = len(self._queue)
        self._queue.clear()
        if dropped:
            logger.debug(f"Command queue cleared ({dropped} dropped)")
        return dropped

    def is_empty(self) -> bool:
        return not self._queue

    def size(self) -> int:
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._queue)
