"""
View - Mediator Registry and Broadcast

📡 Synchronous Fan-Out:
The View keeps the mediator cache and, for every notification name, the
ordered list of observers interested in it. Registration order is
delivery order.

A broadcast iterates over a snapshot of the observer list, so a handler
that registers or removes observers for the same name while the
broadcast is running cannot change which observers receive it. Handler
exceptions are not caught: they abort the broadcast and propagate to the
caller of ``notify_observers``.
"""

import logging
import time
from typing import Dict, List, Optional

from ..interfaces import IMediator
from ..patterns.observer import Notification, Observer
from .context import CoreContext, get_default_context
from .metrics import DispatchMetrics

logger = logging.getLogger(__name__)


class View:
    """
    Mediator registry and observer map for one CoreContext.

    Do not build a second View for a context; use
    ``context.get_view()`` to obtain the existing one.

    Raises:
        AlreadyConstructedError: If the context already has a View
    """

    def __init__(self, context: Optional[CoreContext] = None):
        self.context = context or get_default_context()
        self.context.claim("View", self)

        self._mediator_map: Dict[str, IMediator] = {}
        # Interests as read at registration; removal uses the same list
        self._mediator_interests: Dict[str, List[str]] = {}
        self._observer_map: Dict[str, List[Observer]] = {}

        dispatch_config = self.context.config.dispatch
        self.metrics: Optional[DispatchMetrics] = (
            DispatchMetrics() if dispatch_config.enable_metrics else None
        )
        self._log_broadcasts = dispatch_config.log_broadcasts

        self.initialize_view()

    def initialize_view(self) -> None:
        """Hook for subclasses, called at the end of construction"""
        pass

    # Observers

    def register_observer(self, notification_name: str, observer: Observer) -> None:
        """Append an observer to the list for ``notification_name``"""
        observers = self._observer_map.get(notification_name)
        if observers is None:
            self._observer_map[notification_name] = [observer]
        else:
            observers.append(observer)

    def notify_observers(self, notification: Notification) -> None:
        """
        Deliver a notification to every observer of its name.

        Observers are called synchronously in registration order. A name
        with no observers is a no-op.

        Args:
            notification: The notification passed by reference to each handler
        """
        observers = self._observer_map.get(notification.name)
        if observers is None:
            return

        # The list may change while handlers run
        snapshot = list(observers)

        if self._log_broadcasts:
            logger.debug(f"Broadcasting '{notification.name}' to {len(snapshot)} observer(s)")

        start_time = time.perf_counter()
        delivered = 0
        try:
            for observer in snapshot:
                observer.notify_observer(notification)
                delivered += 1
        except Exception:
            if self.metrics is not None:
                self.metrics.record_handler_error()
            logger.debug(
                f"Observer {snapshot[delivered]!r} failed handling '{notification.name}'; "
                f"{len(snapshot) - delivered - 1} observer(s) not notified"
            )
            raise
        finally:
            if self.metrics is not None:
                duration_ms = (time.perf_counter() - start_time) * 1000
                self.metrics.record_broadcast(delivered, duration_ms)

    def remove_observer(self, notification_name: str, notify_context: object) -> bool:
        """
        Remove the observer bound to ``notify_context`` for a notification name.

        A context owns at most one observer per name, so only the first
        match is removed. The name is dropped once its list is empty.

        Returns:
            True if an observer was removed
        """
        observers = self._observer_map.get(notification_name)
        if observers is None:
            logger.debug(f"remove_observer: no observers for '{notification_name}'")
            return False

        removed = False
        for index, observer in enumerate(observers):
            if observer.compare_notify_context(notify_context):
                del observers[index]
                removed = True
                break

        if not observers:
            del self._observer_map[notification_name]

        return removed

    def has_observers(self, notification_name: str) -> bool:
        return notification_name in self._observer_map

    def observer_count(self, notification_name: str) -> int:
        return len(self._observer_map.get(notification_name, ()))

    # Mediators

    def register_mediator(self, mediator: IMediator) -> None:
        """
        Register a mediator and subscribe it to its notification interests.

        A name that is already registered is left untouched; remove the
        existing mediator first to replace it. One Observer wrapping
        ``mediator.handle_notification`` is shared by every interest.
        ``on_register()`` runs last, so the mediator may broadcast from it.
        """
        if mediator.name in self._mediator_map:
            logger.debug(f"Mediator '{mediator.name}' already registered, ignoring")
            return

        self._mediator_map[mediator.name] = mediator
        self.context.bind(mediator)

        interests = list(mediator.list_notification_interests())
        self._mediator_interests[mediator.name] = interests

        if interests:
            observer = Observer(mediator.handle_notification, mediator)
            for interest in interests:
                self.register_observer(interest, observer)

        logger.debug(f"Registered mediator '{mediator.name}' for {interests}")
        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        return self._mediator_map.get(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return mediator_name in self._mediator_map

    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        """
        Remove a mediator and unsubscribe it from all its interests.

        Returns:
            The removed mediator, or None if no mediator had that name
        """
        mediator = self._mediator_map.get(mediator_name)
        if mediator is None:
            return None

        for interest in self._mediator_interests.pop(mediator_name, []):
            self.remove_observer(interest, mediator)

        del self._mediator_map[mediator_name]
        logger.debug(f"Removed mediator '{mediator_name}'")
        mediator.on_remove()
        return mediator
