"""Counters for View broadcasts."""

from datetime import datetime
from typing import Any, Dict


class DispatchMetrics:
    """Metrics tracking for notify_observers"""

    def __init__(self):
        self.broadcasts = 0
        self.deliveries = 0
        self.handler_errors = 0
        self.total_dispatch_time_ms = 0.0
        self.start_time = datetime.now()

    def record_broadcast(self, delivery_count: int, duration_ms: float):
        """Record one broadcast"""
        self.broadcasts += 1
        self.deliveries += delivery_count
        self.total_dispatch_time_ms += duration_ms

    def record_handler_error(self):
        """Record a handler error"""
        self.handler_errors += 1

    def reset(self):
        self.__init__()

    def get_summary(self) -> Dict[str, Any]:
        """Get metrics summary"""
        uptime_seconds = (datetime.now() - self.start_time).total_seconds()

        return {
            "uptime_seconds": uptime_seconds,
            "broadcasts": self.broadcasts,
            "deliveries": self.deliveries,
            "handler_errors": self.handler_errors,
            "average_dispatch_time_ms": (
                self.total_dispatch_time_ms / self.broadcasts
                if self.broadcasts > 0 else 0
            ),
            "error_rate": (
                self.handler_errors / self.broadcasts
                if self.broadcasts > 0 else 0
            )
        }
