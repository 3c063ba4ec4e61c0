"""
Demo Scenarios - the smart-home walkthroughs, narrated through loguru.

Each scenario builds its own devices, runs them through the framework and
returns the devices so callers (and tests) can inspect the end state.
"""
from typing import Dict

from loguru import logger

from .core.commands import CommandQueue, Invoker, MacroCommand
from .home import (
    AdjustVolumeCommand,
    ChangeChannelCommand,
    EmailService,
    Light,
    LightOffCommand,
    LightOnCommand,
    PrintCommand,
    Printer,
    SendEmailCommand,
    SetVolumeCommand,
    Stereo,
    TV,
    TurnOffCommand,
    TurnOnCommand,
)


def remote_control_demo() -> Dict[str, object]:
    """One invoker, many commands, two devices."""
    logger.info("=== Remote control ===")
    tv = TV("Living Room")
    stereo = Stereo("Music System")

    remote = Invoker()
    for command in (
        TurnOnCommand(tv),
        ChangeChannelCommand(tv),
        TurnOnCommand(stereo),
        AdjustVolumeCommand(stereo),
        TurnOffCommand(tv),
        TurnOffCommand(stereo),
    ):
        remote.set_command(command)
        remote.trigger()

    return {"tv": tv, "stereo": stereo}


def macro_demo(party_volume: int = 11) -> Dict[str, object]:
    """Party mode on and off as two macro commands on one button."""
    logger.info("=== Macro commands ===")
    tv = TV("Living Room")
    stereo = Stereo("Music System")
    light = Light("Living Room")

    party_on = MacroCommand(
        [
            LightOnCommand(light),
            TurnOnCommand(tv),
            TurnOnCommand(stereo),
            SetVolumeCommand(stereo, party_volume),
        ],
        "Party mode on",
    )
    party_off = MacroCommand(
        [LightOffCommand(light), TurnOffCommand(tv), TurnOffCommand(stereo)],
        "Party mode off",
    )

    remote = Invoker()
    logger.info("--- Activating party mode ---")
    remote.set_command(party_on)
    remote.trigger()
    logger.info("--- Deactivating party mode ---")
    remote.set_command(party_off)
    remote.trigger()

    return {"tv": tv, "stereo": stereo, "light": light}


def queue_demo() -> Dict[str, object]:
    """Two batches through the same queue."""
    logger.info("=== Command queue ===")
    printer = Printer("Office Printer")
    email = EmailService("Email Service")
    queue = CommandQueue()

    queue.add_command(PrintCommand(printer, "Report.pdf"))
    queue.add_command(SendEmailCommand(email, "manager@company.com", "Weekly Report"))
    queue.add_command(PrintCommand(printer, "Invoice.pdf"))
    queue.add_command(SendEmailCommand(email, "client@company.com", "Invoice"))
    queue.add_command(PrintCommand(printer, "Presentation.pptx"))
    queue.process_commands()

    logger.info("--- Adding more commands ---")
    queue.add_command(SendEmailCommand(email, "team@company.com", "Meeting Reminder"))
    queue.add_command(PrintCommand(printer, "Agenda.pdf"))
    queue.process_commands()

    return {"printer": printer, "email": email, "queue": queue}


def undo_demo() -> Dict[str, object]:
    """Single-level undo on a light."""
    logger.info("=== Undo ===")
    light = Light("Living Room")
    light_on = LightOnCommand(light)
    light_off = LightOffCommand(light)

    remote = Invoker()
    remote.set_command(light_on)
    remote.trigger()
    remote.set_command(light_off)
    remote.trigger()

    logger.info("--- Undoing last command ---")
    remote.undo_last()  # light back on

    remote.set_command(light_on)
    remote.trigger()
    logger.info("--- Undoing last command ---")
    remote.undo_last()  # light off
    remote.undo_last()  # nothing to undo

    return {"light": light, "remote": remote}


def run_all(party_volume: int = 11) -> None:
    remote_control_demo()
    macro_demo(party_volume)
    queue_demo()
    undo_demo()
