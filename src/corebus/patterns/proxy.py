"""Proxy base class."""

from typing import Any, Optional

from ..interfaces import IProxy
from .observer import Notifier


class Proxy(Notifier, IProxy):
    """
    Named holder for a piece of application data.

    Subclasses add the data access methods and may broadcast changes
    with ``send_notification``.
    """

    NAME = "Proxy"

    def __init__(self, name: Optional[str] = None, data: Any = None):
        super().__init__()
        self._name = name or self.NAME
        self._data = data

    @property
    def name(self) -> str:
        return self._name

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, value: Any):
        self._data = value

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
