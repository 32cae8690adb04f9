"""
Error Types

Exceptions raised by the registries and the configuration layer.
Lookups of names that were never registered are not errors: they
return None or False.
"""


class CoreBusError(Exception):
    """Base exception for corebus errors"""
    pass


class AlreadyConstructedError(CoreBusError):
    """Raised when a second Model, View, Controller or Facade is built for one context"""

    def __init__(self, kind: str):
        super().__init__(f"{kind} already constructed for this context!")
        self.kind = kind


class ConfigurationError(CoreBusError):
    """Raised when configuration input is invalid"""
    pass
