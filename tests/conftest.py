"""Shared fixtures: a publisher that is always closed, and a thread-safe collecting subscriber."""

import threading
from dataclasses import dataclass, field
from typing import List

import pytest

from topicbus import DefaultPublisher, PubSubSettings, Subscriber
from topicbus.message import Message
from topicbus.observability import CollectingErrorReporter

WAIT_SEC = 5


class CollectingSubscriber(Subscriber):
    """Stores every delivered message."""

    def __init__(self, subscriber_id=None) -> None:
        super().__init__(subscriber_id)
        self._messages: List[Message] = []
        self._lock = threading.Lock()

    @property
    def messages(self) -> List[Message]:
        with self._lock:
            return list(self._messages)

    def on_message(self, message: Message) -> None:
        with self._lock:
            self._messages.append(message)


class FailingSubscriber(Subscriber):
    """Raises on every delivery."""

    def on_message(self, message: Message) -> None:
        raise RuntimeError(f"cannot handle {message.content}")


@pytest.fixture
def reporter():
    return CollectingErrorReporter()


@pytest.fixture
def publisher(reporter):
    pub = DefaultPublisher("test", settings=PubSubSettings(max_workers=4), reporter=reporter)
    yield pub
    pub.close()


class EqualByName(Subscriber):
    """Compares equal to any other EqualByName with the same subscriber_id."""

    def __init__(self, subscriber_id=None) -> None:
        super().__init__(subscriber_id)
        self.hits = 0

    def on_message(self, message: Message) -> None:
        self.hits += 1

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EqualByName) and other.subscriber_id == self.subscriber_id

    def __hash__(self) -> int:
        return hash(self.subscriber_id)


@dataclass
class MutableSink:
    """Plain (unhashable) dataclass callable."""

    name: str
    received: List[Message] = field(default_factory=list)

    def __call__(self, message: Message) -> None:
        self.received.append(message)

    def on_weather(self, message: Message) -> None:
        self.received.append(message)
