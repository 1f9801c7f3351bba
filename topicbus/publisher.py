"""Abstract Publisher and base implementation for observability."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from topicbus.observability import get_logger

if TYPE_CHECKING:
    from topicbus.message import Message
    from topicbus.subscriber import SubscriberLike


class Publisher(ABC):
    """Abstract broker: registers subscribers on topics and publishes messages to them."""

    def __init__(self, publisher_id: str, log_level: int | str = "INFO") -> None:
        self._publisher_id = publisher_id
        self._logger = get_logger(f"topicbus.publisher.{publisher_id}", log_level)

    @property
    def publisher_id(self) -> str:
        return self._publisher_id

    @abstractmethod
    def subscribe(self, topic_name: Any, subscriber: "SubscriberLike") -> None:
        """Register subscriber on the named topic, creating the topic if needed."""
        pass

    @abstractmethod
    def unsubscribe(self, topic_name: Any, subscriber: "SubscriberLike") -> None:
        """Remove subscriber from the named topic; no-op if either is unknown."""
        pass

    @abstractmethod
    def publish(self, message: "Message") -> None:
        """
        Publish a message to the subscribers of message.topic.
        Returns once delivery has been scheduled, not when it has finished.
        """
        pass

    def on_publish(self, message: "Message", subscriber_count: int) -> None:
        """Called after a message is handed to dispatch (for observability)."""
        self._logger.info(
            "published",
            extra={
                "topic": message.topic,
                "message_id": message.message_id,
                "message_type": message.type_name,
                "subscriber_count": subscriber_count,
                "publisher_id": self._publisher_id,
            },
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._publisher_id!r})"
