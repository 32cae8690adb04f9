"""
Core Context

🔧 One Registry of Each Kind per Context:
A CoreContext is the application handle shared by every participant. It
holds at most one Model, View, Controller and Facade. Each of those
claims its slot when constructed, so building a second one for the same
context fails fast. The ``get_*`` accessors are factory-injected: they
build the instance on first use with the supplied factory, letting a
derived registry be substituted without touching call sites.
"""

import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

from ..config import CoreConfig, get_config
from ..errors import AlreadyConstructedError, ConfigurationError
from ..patterns.observer import bind_notifier

if TYPE_CHECKING:
    from .model import Model
    from .view import View
    from .controller import Controller
    from ..patterns.facade import Facade

logger = logging.getLogger(__name__)

Factory = Callable[['CoreContext'], Any]

_SLOTS = {
    "Model": "model",
    "View": "view",
    "Controller": "controller",
    "Facade": "facade",
}


class CoreContext:
    """Application context holding one instance of each registry"""

    def __init__(self, config: Optional[CoreConfig] = None, name: str = "default"):
        self.name = name
        self.config = config or get_config()
        self.model: Optional['Model'] = None
        self.view: Optional['View'] = None
        self.controller: Optional['Controller'] = None
        self.facade: Optional['Facade'] = None

    def claim(self, kind: str, instance: Any) -> None:
        """
        Record ``instance`` as this context's ``kind``.

        Called from the registry constructors.

        Raises:
            AlreadyConstructedError: If the slot is already taken
        """
        slot = _SLOTS[kind]
        if getattr(self, slot) is not None:
            raise AlreadyConstructedError(kind)
        setattr(self, slot, instance)
        logger.debug(f"Context '{self.name}': {kind} constructed ({type(instance).__name__})")

    def get_model(self, factory: Optional[Factory] = None) -> 'Model':
        """Get the Model, building it with ``factory`` on first use"""
        if self.model is None:
            from .model import Model
            self._build("Model", factory or Model)
        return self.model

    def get_view(self, factory: Optional[Factory] = None) -> 'View':
        """Get the View, building it with ``factory`` on first use"""
        if self.view is None:
            from .view import View
            self._build("View", factory or View)
        return self.view

    def get_controller(self, factory: Optional[Factory] = None) -> 'Controller':
        """Get the Controller, building it with ``factory`` on first use"""
        if self.controller is None:
            from .controller import Controller
            self._build("Controller", factory or Controller)
        return self.controller

    def get_facade(self, factory: Optional[Factory] = None) -> 'Facade':
        """Get the Facade, building it with ``factory`` on first use"""
        if self.facade is None:
            from ..patterns.facade import Facade
            self._build("Facade", factory or Facade)
        return self.facade

    def bind(self, participant: Any) -> None:
        """Route a participant's notifications through this context's Facade"""
        bind_notifier(participant, self, self.facade)

    def _build(self, kind: str, factory: Factory) -> None:
        instance = factory(self)
        if getattr(self, _SLOTS[kind]) is not instance:
            raise ConfigurationError(
                f"{kind} factory must construct its instance for context '{self.name}'"
            )

    def __repr__(self) -> str:
        return f"CoreContext(name={self.name!r})"


# Default context management
_default_context: Optional[CoreContext] = None


def set_default_context(context: Optional[CoreContext]):
    """Set the default context"""
    global _default_context
    _default_context = context


def get_default_context() -> CoreContext:
    """Get the default context, creating it on first use"""
    global _default_context

    if _default_context is None:
        _default_context = CoreContext()

    return _default_context


def reset_default_context():
    """Drop the default context so the next access starts fresh"""
    set_default_context(None)


def get_facade(factory: Optional[Factory] = None) -> 'Facade':
    """Get the default context's Facade"""
    return get_default_context().get_facade(factory)


__all__ = [
    "CoreContext", "set_default_context", "get_default_context",
    "reset_default_context", "get_facade"
]
