"""
Home - reference receivers and the commands that drive them.
"""
from .devices import Switchable, Light, TV, Stereo, Printer, EmailService
from .commands import (
    TurnOnCommand,
    TurnOffCommand,
    LightOnCommand,
    LightOffCommand,
    ChangeChannelCommand,
    AdjustVolumeCommand,
    SetVolumeCommand,
    PrintCommand,
    SendEmailCommand,
)

__all__ = [
    # Devices
    "Switchable",
    "Light",
    "TV",
    "Stereo",
    "Printer",
    "EmailService",
    # Commands
    "TurnOnCommand",
    "TurnOffCommand",
    "LightOnCommand",
    "LightOffCommand",
    "ChangeChannelCommand",
    "AdjustVolumeCommand",
    "SetVolumeCommand",
    "PrintCommand",
    "SendEmailCommand",
]
