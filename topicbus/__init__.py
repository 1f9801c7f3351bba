"""In-process publish-subscribe broker with asynchronous fan-out delivery."""

from topicbus.config import PubSubSettings, load_settings
from topicbus.default_publisher import DefaultPublisher
from topicbus.default_subscriber import DefaultSubscriber
from topicbus.errors import (
    InvalidMessageError,
    PubSubError,
    PublisherClosedError,
    SubscriberDeliveryError,
)
from topicbus.message import Message, MessageType
from topicbus.publisher import Publisher
from topicbus.subscriber import Subscriber
from topicbus.topic import Topic, TopicName

__all__ = [
    "Message",
    "MessageType",
    "Topic",
    "TopicName",
    "Publisher",
    "Subscriber",
    "DefaultPublisher",
    "DefaultSubscriber",
    "PubSubSettings",
    "load_settings",
    "PubSubError",
    "InvalidMessageError",
    "PublisherClosedError",
    "SubscriberDeliveryError",
]
