import pytest
from loguru import logger

from commanddeck.core.commands import Command, UndoableCommand
from commanddeck.home import EmailService, Light, Printer, Stereo, TV


class RecordingCommand(UndoableCommand):
    """Appends ("execute"|"undo", name) to a shared log."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    @property
    def description(self) -> str:
        return self.name

    def execute(self):
        self.log.append(("execute", self.name))

    def undo(self):
        self.log.append(("undo", self.name))


class OneWayCommand(Command):
    """Recording command without undo support."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def execute(self):
        self.log.append(("execute", self.name))


class FailingCommand(UndoableCommand):
    def __init__(self, error=None):
        self.error = error or RuntimeError("receiver failure")

    def execute(self):
        raise self.error

    def undo(self):
        raise self.error


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def recording(call_log):
    def factory(name):
        return RecordingCommand(name, call_log)
    return factory


@pytest.fixture
def one_way(call_log):
    def factory(name):
        return OneWayCommand(name, call_log)
    return factory


@pytest.fixture
def failing():
    return FailingCommand


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


# --- Devices ---
@pytest.fixture
def light():
    return Light("Living Room")

@pytest.fixture
def tv():
    return TV("Living Room")

@pytest.fixture
def stereo():
    return Stereo("Music System")

@pytest.fixture
def printer():
    return Printer("Office Printer")

@pytest.fixture
def email():
    return EmailService("Email Service")
