"""Mediator base class."""

from typing import Any, List, Optional

from ..interfaces import IMediator
from .observer import Notification, Notifier


class Mediator(Notifier, IMediator):
    """
    Named participant wrapping a view component.

    Override ``list_notification_interests`` and ``handle_notification``
    to react to broadcasts. The interest list is read once, when the
    mediator is registered.
    """

    NAME = "Mediator"

    def __init__(self, name: Optional[str] = None, view_component: Any = None):
        super().__init__()
        self._name = name or self.NAME
        self._view_component = view_component

    @property
    def name(self) -> str:
        return self._name

    @property
    def view_component(self) -> Any:
        return self._view_component

    @view_component.setter
    def view_component(self, value: Any):
        self._view_component = value

    def list_notification_interests(self) -> List[str]:
        return []

    def handle_notification(self, notification: Notification) -> None:
        pass

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
