"""Abstract Subscriber and helpers for callable subscribers."""

import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from topicbus.observability import get_logger

if TYPE_CHECKING:
    from topicbus.message import Message


class Subscriber(ABC):
    """Abstract base class for objects that receive messages from topics.

    Topics track subscribers by reference, so registering the same object twice
    on one topic keeps a single entry.
    """

    def __init__(self, subscriber_id: Optional[str] = None) -> None:
        self._subscriber_id = subscriber_id or f"sub_{uuid.uuid4().hex[:8]}"
        self._logger = get_logger("topicbus.subscriber")

    @property
    def subscriber_id(self) -> str:
        return self._subscriber_id

    @abstractmethod
    def on_message(self, message: "Message") -> None:
        """Handle a delivered message. Must be implemented by subclasses."""
        pass

    def __call__(self, message: "Message") -> None:
        self.on_message(message)

    def on_subscribe(self, topic_name: str) -> None:
        """Called when this subscriber is added to a topic (for observability)."""
        self._logger.info(
            "subscribed",
            extra={"topic": topic_name, "subscriber_id": self._subscriber_id},
        )

    def on_unsubscribe(self, topic_name: str) -> None:
        """Called when this subscriber is removed from a topic (for observability)."""
        self._logger.info(
            "unsubscribed",
            extra={"topic": topic_name, "subscriber_id": self._subscriber_id},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._subscriber_id!r})"


SubscriberLike = Union[Subscriber, Callable[["Message"], Any]]


def ensure_subscriber(subscriber: Any) -> SubscriberLike:
    """Return subscriber unchanged if it can receive messages, else raise TypeError."""
    if isinstance(subscriber, Subscriber) or callable(subscriber):
        return subscriber
    raise TypeError(f"subscriber must be a Subscriber or a callable, got {type(subscriber).__name__}")


def notify(subscriber: SubscriberLike, message: "Message") -> None:
    """Hand one message to one subscriber."""
    if isinstance(subscriber, Subscriber):
        subscriber.on_message(message)
    else:
        subscriber(message)
