"""
Home Devices - reference receivers for the command framework.

Each device owns its own state and narrates what it does through the
logger. Commands are the only callers; invokers and queues never touch
devices directly.
"""
from typing import List, Protocol, Tuple

from loguru import logger


class Switchable(Protocol):
    """Anything a TurnOnCommand/TurnOffCommand can drive."""

    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...


class Light:
    def __init__(self, location: str):
        self.location = location
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        logger.info(f"{self.location} light is ON")

    def turn_off(self) -> None:
        self.is_on = False
        logger.info(f"{self.location} light is OFF")


class TV:
    def __init__(self, name: str):
        self.name = name
        self.is_on = False
        self.channel = 1

    def turn_on(self) -> None:
        self.is_on = True
        logger.info(f"{self.name} TV is now on")

    def turn_off(self) -> None:
        self.is_on = False
        logger.info(f"{self.name} TV is now off")

    def change_channel(self) -> None:
        """Step to the next channel."""
        self.channel += 1
        logger.info(f"{self.name} TV channel changed to {self.channel}")


class Stereo:
    def __init__(self, name: str, volume: int = 0):
        self.name = name
        self.is_on = False
        self.volume = volume

    def turn_on(self) -> None:
        self.is_on = True
        logger.info(f"{self.name} Stereo is now on")

    def turn_off(self) -> None:
        self.is_on = False
        logger.info(f"{self.name} Stereo is now off")

    def set_volume(self, volume: int) -> None:
        self.volume = volume
        logger.info(f"{self.name} Stereo volume set to {volume}")

    def adjust_volume(self, step: int = 1) -> None:
        self.volume += step
        logger.info(f"{self.name} Stereo volume adjusted to {self.volume}")


class Printer:
    def __init__(self, name: str):
        self.name = name
        self.printed: List[str] = []
        self.cancelled_jobs = 0

    def print_document(self, document: str) -> None:
        self.printed.append(document)
        logger.info(f"{self.name} printing: {document}")

    def cancel(self) -> None:
        self.cancelled_jobs += 1
        logger.info(f"{self.name} print job cancelled")


class EmailService:
    def __init__(self, name: str):
        self.name = name
        self.sent: List[Tuple[str, str]] = []

    def send(self, recipient: str, subject: str) -> None:
        self.sent.append((recipient, subject))
        logger.info(f"{self.name} sending email to {recipient}: {subject}")
