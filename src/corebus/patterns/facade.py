"""
Facade - Single Entry Point

🚀 Unified Registry Access:
The Facade owns a context's Model, View and Controller and forwards the
register/retrieve/has/remove calls to them. ``send_notification`` is the
sanctioned way to start a broadcast.
"""

import logging
from typing import Any, Optional

from ..core.context import CoreContext, get_default_context
from ..core.controller import Controller
from ..core.model import Model
from ..core.view import View
from ..interfaces import CommandFactory, IMediator, IProxy
from .observer import Notification

logger = logging.getLogger(__name__)


class Facade:
    """
    Facade for one CoreContext.

    Subclasses register startup commands, or substitute derived
    registries, by overriding the ``initialize_*`` hooks and calling the
    base implementation.

    Raises:
        AlreadyConstructedError: If the context already has a Facade
    """

    def __init__(self, context: Optional[CoreContext] = None):
        self.context = context or get_default_context()
        self.context.claim("Facade", self)
        self.model: Optional[Model] = None
        self.view: Optional[View] = None
        self.controller: Optional[Controller] = None
        self.initialize_facade()

    def initialize_facade(self) -> None:
        self.initialize_model()
        self.initialize_controller()
        self.initialize_view()

    def initialize_model(self) -> None:
        self.model = self.context.get_model()

    def initialize_controller(self) -> None:
        self.controller = self.context.get_controller()

    def initialize_view(self) -> None:
        self.view = self.context.get_view()

    # Commands

    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        if self.controller is not None:
            self.controller.register_command(notification_name, factory)

    def has_command(self, notification_name: str) -> bool:
        if self.controller is None:
            return False
        return self.controller.has_command(notification_name)

    def remove_command(self, notification_name: str) -> None:
        if self.controller is not None:
            self.controller.remove_command(notification_name)

    # Proxies

    def register_proxy(self, proxy: IProxy) -> None:
        if self.model is not None:
            self.model.register_proxy(proxy)

    def retrieve_proxy(self, proxy_name: str) -> Optional[IProxy]:
        if self.model is None:
            return None
        return self.model.retrieve_proxy(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        if self.model is None:
            return False
        return self.model.has_proxy(proxy_name)

    def remove_proxy(self, proxy_name: str) -> Optional[IProxy]:
        if self.model is None:
            return None
        return self.model.remove_proxy(proxy_name)

    # Mediators

    def register_mediator(self, mediator: IMediator) -> None:
        if self.view is not None:
            self.view.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        if self.view is None:
            return None
        return self.view.retrieve_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        if self.view is None:
            return False
        return self.view.has_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        if self.view is None:
            return None
        return self.view.remove_mediator(mediator_name)

    # Notifications

    def notify_observers(self, notification: Notification) -> None:
        """
        Broadcast a prebuilt notification.

        Mostly useful for custom Notification subclasses; ordinary code
        should call ``send_notification``.
        """
        if self.view is not None:
            self.view.notify_observers(notification)

    def send_notification(self, notification_name: str, body: Any = None, type: Optional[str] = None) -> None:
        """
        Create and broadcast a notification.

        Args:
            notification_name: Name observers registered for
            body: Optional payload, shared by reference with every handler
            type: Optional notification type
        """
        self.notify_observers(Notification(notification_name, body, type))
