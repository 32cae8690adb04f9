"""
Patterns - participants built on the core registries.

- observer: Notification, Observer, Notifier
- proxy / mediator / command: base classes for model, view and controller participants
- facade: single entry point over a context's registries

The facade module depends on ``corebus.core`` and is imported from there
or from the top-level package, not from here.
"""

from .observer import Notification, Observer, Notifier, context_key
from .proxy import Proxy
from .mediator import Mediator
from .command import SimpleCommand, MacroCommand

__all__ = [
    "Notification", "Observer", "Notifier", "context_key",
    "Proxy", "Mediator", "SimpleCommand", "MacroCommand"
]
