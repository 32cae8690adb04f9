"""
Controller - Command Registry

🎯 Notification to Command Mapping:
The Controller maps notification names to command factories. For each
mapped name it installs exactly one observer with the View, pointing at
``execute_command``; registering the same name again only swaps the
factory. Every execution builds a fresh command, so no state carries
over between broadcasts.
"""

import logging
import uuid
from typing import Dict, Optional

from ..interfaces import CommandFactory
from ..patterns.observer import Notification, Observer
from .context import CoreContext, get_default_context
from .view import View

logger = logging.getLogger(__name__)


class Controller:
    """
    Command registry for one CoreContext.

    Do not build a second Controller for a context; use
    ``context.get_controller()`` to obtain the existing one.

    Raises:
        AlreadyConstructedError: If the context already has a Controller
    """

    def __init__(self, context: Optional[CoreContext] = None):
        self.context = context or get_default_context()
        self.context.claim("Controller", self)
        self.notify_key = uuid.uuid4().hex
        self._command_map: Dict[str, CommandFactory] = {}
        self.view: Optional[View] = None
        self.initialize_controller()

    def initialize_controller(self) -> None:
        """
        Attach to the context's View.

        A subclass that needs a derived View should override this and
        pass its own factory to ``context.get_view``.
        """
        self.view = self.context.get_view()

    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        """
        Map a notification name to a command factory.

        The View observer is only created the first time the name is
        mapped; later calls replace the factory.

        Args:
            notification_name: Name that triggers the command
            factory: Zero-argument callable returning a command
        """
        if notification_name not in self._command_map:
            if self.view is not None:
                self.view.register_observer(
                    notification_name, Observer(self.execute_command, self)
                )
        else:
            logger.debug(f"Replacing command factory for '{notification_name}'")
        self._command_map[notification_name] = factory

    def execute_command(self, notification: Notification) -> None:
        """Build a fresh command for the notification's name and execute it"""
        factory = self._command_map.get(notification.name)
        if factory is None:
            return

        command = factory()
        self.context.bind(command)
        command.execute(notification)

    def has_command(self, notification_name: str) -> bool:
        return notification_name in self._command_map

    def remove_command(self, notification_name: str) -> None:
        """Drop the mapping and the View observer for a notification name"""
        if not self.has_command(notification_name):
            logger.debug(f"remove_command: no command for '{notification_name}'")
            return

        if self.view is not None:
            self.view.remove_observer(notification_name, self)
        del self._command_map[notification_name]
