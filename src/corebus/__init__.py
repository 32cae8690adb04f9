"""
corebus - In-Process Notification Bus with Named Registries

📡 Loosely-coupled participants, one broadcast path:
Proxies (model side), Mediators (view side) and Commands (controller
side) talk to each other through notifications instead of holding
references to one another.

🧱 core/      - Model, View and Controller registries and the CoreContext holding them
🧩 patterns/  - Notification, Observer, Notifier, Facade and participant base classes
🔧 config     - dataclass configuration and environment loading

Quick Start:
    from corebus import CoreContext, SimpleCommand

    class Greet(SimpleCommand):
        def execute(self, notification):
            notification.body.append("hello")

    facade = CoreContext().get_facade()
    facade.register_command("greet", Greet)

    messages = []
    facade.send_notification("greet", messages)
"""

from .errors import CoreBusError, AlreadyConstructedError, ConfigurationError
from .config import (
    CoreConfig, Environment, DispatchConfig, LoggingConfig,
    get_config, set_config, configure_from_dict, configure_from_file
)
from .logging_setup import configure_logging
from .interfaces import ICommand, IMediator, IProxy, CommandFactory
from .core import (
    CoreContext, get_default_context, set_default_context,
    reset_default_context, get_facade,
    DispatchMetrics, Model, View, Controller
)
from .patterns import (
    Notification, Observer, Notifier, context_key,
    Proxy, Mediator, SimpleCommand, MacroCommand
)
from .patterns.facade import Facade

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CoreBusError", "AlreadyConstructedError", "ConfigurationError",

    # Configuration
    "CoreConfig", "Environment", "DispatchConfig", "LoggingConfig",
    "get_config", "set_config", "configure_from_dict", "configure_from_file",
    "configure_logging",

    # Contracts
    "ICommand", "IMediator", "IProxy", "CommandFactory",

    # Core registries
    "CoreContext", "get_default_context", "set_default_context",
    "reset_default_context", "get_facade",
    "DispatchMetrics", "Model", "View", "Controller",

    # Patterns
    "Notification", "Observer", "Notifier", "context_key",
    "Proxy", "Mediator", "SimpleCommand", "MacroCommand", "Facade",
]
