"""Counters and gauges for publish and delivery activity."""

import threading
from typing import Dict

MESSAGES_PUBLISHED = "messages_published"
MESSAGES_UNROUTED = "messages_unrouted"
DELIVERIES_SUBMITTED = "deliveries_submitted"
DELIVERIES_SUCCEEDED = "deliveries_succeeded"
DELIVERIES_FAILED = "deliveries_failed"
TOPICS = "topics"


class Metrics:
    """In-memory metrics collector, safe to update from worker threads."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._gauges: Dict[str, int] = {}
        self._lock = threading.Lock()

    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        with self._lock:
            self._counters[name] = self._counters.get(name, 0) + value

    def set_gauge(self, name: str, value: int) -> None:
        """Set a gauge value."""
        with self._lock:
            self._gauges[name] = value

    def get_counter(self, name: str) -> int:
        with self._lock:
            return self._counters.get(name, 0)

    def get_gauge(self, name: str) -> int:
        with self._lock:
            return self._gauges.get(name, 0)

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        """Return a snapshot of all metrics."""
        with self._lock:
            return {
                "counters": dict(self._counters),
                "gauges": dict(self._gauges),
            }
