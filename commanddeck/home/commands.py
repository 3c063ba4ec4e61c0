"""
Home Commands - concrete commands over the reference devices.

Switching commands are undoable (on <-> off). Channel, volume, print and
email commands are fire-and-forget: they have no fixed inverse, so they
are plain Commands.
"""
from ..core.commands import ActionCommand, ReversibleActionCommand
from .devices import EmailService, Light, Printer, Stereo, Switchable, TV


class TurnOnCommand(ReversibleActionCommand):
    """Turn any switchable device on; undo turns it off."""

    def __init__(self, device: Switchable):
        super().__init__(device, "turn_on", "turn_off",
                         description=f"Turn on {_label(device)}")


class TurnOffCommand(ReversibleActionCommand):
    """Turn any switchable device off; undo turns it back on."""

    def __init__(self, device: Switchable):
        super().__init__(device, "turn_off", "turn_on",
                         description=f"Turn off {_label(device)}")


class LightOnCommand(TurnOnCommand):
    def __init__(self, light: Light):
        super().__init__(light)


class LightOffCommand(TurnOffCommand):
    def __init__(self, light: Light):
        super().__init__(light)


class ChangeChannelCommand(ActionCommand):
    def __init__(self, tv: TV):
        super().__init__(tv, "change_channel",
                         description=f"Change channel on {tv.name} TV")


class AdjustVolumeCommand(ActionCommand):
    def __init__(self, stereo: Stereo, step: int = 1):
        super().__init__(stereo, "adjust_volume", step,
                         description=f"Adjust {stereo.name} volume by {step}")


class SetVolumeCommand(ActionCommand):
    def __init__(self, stereo: Stereo, volume: int):
        super().__init__(stereo, "set_volume", volume,
                         description=f"Set {stereo.name} volume to {volume}")

    @property
    def volume(self) -> int:
        return self.args[0]


class PrintCommand(ActionCommand):
    def __init__(self, printer: Printer, document: str):
        super().__init__(printer, "print_document", document,
                         description=f"Print {document}")

    @property
    def document(self) -> str:
        return self.args[0]


class SendEmailCommand(ActionCommand):
    def __init__(self, email_service: EmailService, recipient: str, subject: str):
        super().__init__(email_service, "send", recipient, subject,
                         description=f"Email {recipient}: {subject}")


def _label(device) -> str:
    name = getattr(device, "name", None) or getattr(device, "location", None)
    kind = type(device).__name__
    return f"{name} {kind}" if name else kind
