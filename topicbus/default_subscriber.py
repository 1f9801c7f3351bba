"""Concrete Subscriber implementation with observability hooks."""

from topicbus.message import Message
from topicbus.subscriber import Subscriber


class DefaultSubscriber(Subscriber):
    """Subscriber that logs every message it receives (override on_message)."""

    def on_message(self, message: Message) -> None:
        """Log delivery; subclasses can override for custom handling."""
        self._logger.info(
            "message_received",
            extra={
                "topic": message.topic,
                "message_id": message.message_id,
                "message_type": message.type_name,
                "subscriber_id": self.subscriber_id,
            },
        )
