"""
Command base classes.

A SimpleCommand does its work in ``execute``. A MacroCommand runs a list
of sub-commands, built fresh from their factories, in the order they were
added.
"""

from typing import List

from ..interfaces import CommandFactory, ICommand
from .observer import Notification, Notifier, bind_notifier


class SimpleCommand(Notifier, ICommand):
    """Base for commands that handle a notification directly"""

    def execute(self, notification: Notification) -> None:
        pass


class MacroCommand(Notifier, ICommand):
    """
    Command made of ordered sub-commands.

    Override ``initialize_macro_command`` and call ``add_sub_command``
    for each step. Each sub-command receives the same notification.
    """

    def __init__(self):
        super().__init__()
        self._sub_commands: List[CommandFactory] = []
        self.initialize_macro_command()

    def initialize_macro_command(self) -> None:
        pass

    def add_sub_command(self, factory: CommandFactory) -> None:
        self._sub_commands.append(factory)

    def execute(self, notification: Notification) -> None:
        """Run every sub-command once, first in first out"""
        while self._sub_commands:
            factory = self._sub_commands.pop(0)
            command = factory()
            bind_notifier(command, self._context, self._facade)
            command.execute(notification)
