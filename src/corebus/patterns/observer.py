"""
Observer Pattern - Notifications and Observers

📨 Message Envelope and Handler Binding:
A Notification is the immutable envelope handed to every observer of a
broadcast. An Observer binds a handler to the context that owns it; the
context, not the handler, identifies the observer when it is removed.
A Notifier gives any participant a ``send_notification`` routed through
its Facade.
"""

import uuid
from typing import Any, Callable, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..core.context import CoreContext
    from .facade import Facade


class Notification(BaseModel):
    """
    Immutable message envelope.

    Fields cannot be reassigned after construction. The body is held by
    reference and never copied, so every handler of a broadcast sees the
    same object and may mutate it (e.g. to accumulate a result).

    Equality and hashing are by identity: a notification is one
    broadcast, and bodies are usually unhashable.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    body: Any = None
    type: Optional[str] = None

    def __init__(self, name: str, body: Any = None, type: Optional[str] = None, **data: Any):
        super().__init__(name=name, body=body, type=type, **data)

    def __str__(self) -> str:
        body = "None" if self.body is None else str(self.body)
        note_type = "None" if self.type is None else self.type
        return f"Notification Name: {self.name}\nBody: {body}\nType: {note_type}"

    __eq__ = object.__eq__
    __hash__ = object.__hash__


NotifyMethod = Callable[[Notification], None]


def context_key(context: Any) -> str:
    """
    Opaque handle used to match an observer's owning context.

    Participants built on Notifier (and the Controller) carry a
    ``notify_key`` assigned at construction; anything else falls back to
    a key derived from the object's identity.
    Copying a Notifier gives the copy a fresh key, so a copy never
    matches the original's observers.
    """
    key = getattr(context, "notify_key", None)
    if key is None:
        return f"id:{id(context)}"
    return key


class Observer:
    """A handler bound to the context that owns it"""

    def __init__(self, notify_method: Optional[NotifyMethod] = None, notify_context: Any = None):
        self.notify_method = notify_method
        self.notify_context = notify_context

    def notify_observer(self, notification: Notification) -> None:
        """Invoke the handler with the notification"""
        if self.notify_method is not None:
            self.notify_method(notification)

    def compare_notify_context(self, obj: Any) -> bool:
        """True when ``obj`` is the context this observer was bound to"""
        return context_key(obj) == context_key(self.notify_context)

    def __repr__(self) -> str:
        method = getattr(self.notify_method, "__qualname__", repr(self.notify_method))
        return f"Observer({method}, context={context_key(self.notify_context)})"


class Notifier:
    """
    Base for participants that send notifications.

    The Facade is resolved lazily on first use, in this order: the one
    handed to ``initialize_notifier``, the Facade of the context the
    participant was registered with (the registries attach it), and
    finally the default context's Facade.
    """

    def __init__(self):
        self.notify_key = uuid.uuid4().hex
        self._facade: Optional['Facade'] = None
        self._context: Optional['CoreContext'] = None

    def initialize_notifier(self, facade: 'Facade') -> None:
        """Bind this participant to a specific Facade"""
        self._facade = facade

    def attach_context(self, context: 'CoreContext') -> None:
        """Resolve the Facade through ``context`` when first needed"""
        self._context = context

    @property
    def facade(self) -> 'Facade':
        if getattr(self, "_facade", None) is None:
            context = getattr(self, "_context", None)
            if context is not None:
                self._facade = context.get_facade()
            else:
                from ..core.context import get_facade
                self._facade = get_facade()
        return self._facade

    def send_notification(self, notification_name: str, body: Any = None, type: Optional[str] = None) -> None:
        """Build a Notification and broadcast it through the Facade"""
        self.facade.send_notification(notification_name, body, type)

    def __copy__(self):
        # A copy is a separate observer context
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.notify_key = uuid.uuid4().hex
        return clone


def bind_notifier(participant: Any, context: Optional['CoreContext'] = None,
                  facade: Optional['Facade'] = None) -> None:
    """
    Route an unbound Notifier participant through ``facade`` or ``context``.

    Participants that already have a Facade or a context keep it.
    """
    if not isinstance(participant, Notifier):
        return
    if getattr(participant, "_facade", None) is not None:
        return
    if facade is not None:
        participant.initialize_notifier(facade)
    elif context is not None and getattr(participant, "_context", None) is None:
        participant.attach_context(context)


__all__ = [
    "Notification", "Observer", "Notifier", "NotifyMethod",
    "context_key", "bind_notifier"
]
