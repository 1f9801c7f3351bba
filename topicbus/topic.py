"""Topic class grouping the subscribers of one named channel (in-memory only)."""

import inspect
import threading
from enum import Enum
from typing import TYPE_CHECKING, Dict, Hashable, Tuple

if TYPE_CHECKING:
    from topicbus.subscriber import SubscriberLike


class TopicName(str, Enum):
    """Topic names used by the demo subscribers."""

    WEATHER = "weather"
    TEMPERATURE = "temperature"
    CUSTOMER_SUPPORT = "customer_support"


def subscriber_key(subscriber: "SubscriberLike") -> Hashable:
    """Identity key for a subscriber.

    A bound method is keyed by (instance, function) because every attribute
    access creates a new method object.
    """
    if inspect.ismethod(subscriber):
        return (id(subscriber.__self__), id(subscriber.__func__))
    return id(subscriber)


class Topic:
    """Named channel holding its current subscribers, compared by reference."""

    def __init__(self, name: str) -> None:
        self._name = name
        # values keep the subscribers alive, so their ids stay unique while registered
        self._subscribers: Dict[Hashable, "SubscriberLike"] = {}
        self._messages_published: int = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    @property
    def messages_published(self) -> int:
        with self._lock:
            return self._messages_published

    def register(self, subscriber: "SubscriberLike") -> bool:
        """Add a subscriber. Returns False if this same reference was already registered."""
        key = subscriber_key(subscriber)
        with self._lock:
            if key in self._subscribers:
                return False
            self._subscribers[key] = subscriber
            return True

    def unregister(self, subscriber: "SubscriberLike") -> bool:
        """Remove a subscriber. Returns False if it was not registered."""
        with self._lock:
            return self._subscribers.pop(subscriber_key(subscriber), None) is not None

    def current_subscribers(self) -> Tuple["SubscriberLike", ...]:
        """Return an immutable snapshot of the subscribers."""
        with self._lock:
            return tuple(self._subscribers.values())

    def record_published(self) -> None:
        with self._lock:
            self._messages_published += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Topic):
            return False
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Topic(name={self._name!r}, subscribers={self.subscriber_count})"
