"""
Model - Proxy Registry

Name-keyed cache of Proxy instances. Registration and removal call the
proxy's lifecycle hooks; there is no dispatch logic here.
"""

import logging
from typing import Dict, Optional

from ..interfaces import IProxy
from .context import CoreContext, get_default_context

logger = logging.getLogger(__name__)


class Model:
    """
    Proxy registry for one CoreContext.

    Do not build a second Model for a context; use
    ``context.get_model()`` to obtain the existing one.

    Raises:
        AlreadyConstructedError: If the context already has a Model
    """

    def __init__(self, context: Optional[CoreContext] = None):
        self.context = context or get_default_context()
        self.context.claim("Model", self)
        self._proxy_map: Dict[str, IProxy] = {}
        self.initialize_model()

    def initialize_model(self) -> None:
        """Hook for subclasses, called at the end of construction"""
        pass

    def register_proxy(self, proxy: IProxy) -> None:
        """Store the proxy under its name, then call its on_register()"""
        if proxy.name in self._proxy_map:
            logger.debug(f"Replacing proxy '{proxy.name}'")
        self._proxy_map[proxy.name] = proxy
        self.context.bind(proxy)
        proxy.on_register()

    def retrieve_proxy(self, proxy_name: str) -> Optional[IProxy]:
        return self._proxy_map.get(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return proxy_name in self._proxy_map

    def remove_proxy(self, proxy_name: str) -> Optional[IProxy]:
        """
        Remove a proxy and call its on_remove().

        Returns:
            The removed proxy, or None if no proxy had that name
        """
        proxy = self._proxy_map.pop(proxy_name, None)
        if proxy is None:
            logger.debug(f"remove_proxy: no proxy named '{proxy_name}'")
            return None
        proxy.on_remove()
        return proxy
