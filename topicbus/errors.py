"""Error taxonomy for the pub-sub broker."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from topicbus.message import Message


class PubSubError(Exception):
    """Base class for topicbus errors."""


class InvalidMessageError(PubSubError, ValueError):
    """Raised when a Message is constructed with an empty or non-string topic."""


class PublisherClosedError(PubSubError, RuntimeError):
    """Raised when publishing through a publisher that has been closed."""


class SubscriberDeliveryError(PubSubError):
    """Wraps an exception raised by a subscriber while handling a message.

    Never raised to the publisher; instances are handed to the error reporter.
    """

    def __init__(self, subscriber: Any, delivered: "Message", original: BaseException) -> None:
        super().__init__(
            f"subscriber {subscriber!r} failed on message {delivered.message_id}: {original!r}"
        )
        self.subscriber = subscriber
        self.delivered = delivered
        self.original = original
        self.__cause__ = original
