"""
Event System - Synchronous observer signals.

Provides:
- Signal: observer used for undo availability and config change notifications

Usage:
    from commanddeck.core.events import Signal

    changed = Signal("Changed")
    changed.connect(on_changed)
    changed.emit("general", "debug_mode", False)
"""
from .observer import Signal


__all__ = ["Signal"]
