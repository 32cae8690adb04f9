"""
Participant Contracts

Abstract interfaces for the collaborators the registries store. The
registries only ever call the methods declared here, so any object
implementing them can take part; the base classes in
``corebus.patterns`` are the usual way to do so.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .patterns.observer import Notification


class ICommand(ABC):
    """Handler built fresh for every execution"""

    @abstractmethod
    def execute(self, notification: 'Notification') -> None:
        """Carry out the command for the given notification"""
        pass


CommandFactory = Callable[[], ICommand]


class IProxy(ABC):
    """Named model-side registry entry"""

    name: str
    data: Any

    @abstractmethod
    def on_register(self) -> None:
        """Called by the Model after registration"""
        pass

    @abstractmethod
    def on_remove(self) -> None:
        """Called by the Model after removal"""
        pass


class IMediator(ABC):
    """Named view-side participant with a fixed set of interests"""

    name: str

    @abstractmethod
    def list_notification_interests(self) -> List[str]:
        """Notification names to observe, read once at registration"""
        pass

    @abstractmethod
    def handle_notification(self, notification: 'Notification') -> None:
        """Receive a broadcast for one of the declared interests"""
        pass

    @abstractmethod
    def on_register(self) -> None:
        """Called by the View after registration"""
        pass

    @abstractmethod
    def on_remove(self) -> None:
        """Called by the View after removal"""
        pass


__all__ = ["ICommand", "CommandFactory", "IProxy", "IMediator"]
