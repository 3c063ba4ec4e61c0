from loguru import logger
from typing import Callable, List


class Signal:
    """
    Synchronous notification channel.

    The Invoker publishes undo availability through it and ConfigManager
    publishes setting changes. Callbacks run in connection order on the
    emitting thread; a callback that raises is logged and skipped so the
    emitter's own state change is never rolled back by a listener.

    Example:
        remote.can_undo_changed.connect(undo_button.set_enabled)
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable):
        """Subscribe callback; connecting the same callback twice is ignored."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, *args, **kwargs):
        """Call every subscriber with the given payload."""
        # snapshot: callbacks may disconnect themselves
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' subscriber {sub!r} failed: {e}")
