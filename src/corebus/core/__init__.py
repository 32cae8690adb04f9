"""
Core registries: Model, View and Controller, and the CoreContext that
holds one of each.
"""

from .context import (
    CoreContext, get_default_context, set_default_context,
    reset_default_context, get_facade
)
from .metrics import DispatchMetrics
from .model import Model
from .view import View
from .controller import Controller

__all__ = [
    "CoreContext", "get_default_context", "set_default_context",
    "reset_default_context", "get_facade",
    "DispatchMetrics", "Model", "View", "Controller"
]
