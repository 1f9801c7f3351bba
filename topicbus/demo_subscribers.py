"""Subscribers used by the example script: weather and customer-support listeners."""

import threading
import time
from typing import List, Optional

from topicbus.message import Message
from topicbus.subscriber import Subscriber

DEFAULT_DELAY_SEC = 0.2


class _RecordingSubscriber(Subscriber):
    """Logs each message as '<label> Subscriber: <id> received: <content>' and keeps it."""

    label = "Recording"

    def __init__(self, subscriber_id: Optional[str] = None) -> None:
        super().__init__(subscriber_id)
        self._received: List[Message] = []
        self._received_lock = threading.Lock()

    @property
    def received(self) -> List[Message]:
        with self._received_lock:
            return list(self._received)

    def on_message(self, message: Message) -> None:
        with self._received_lock:
            self._received.append(message)
        self._logger.info(
            "%s Subscriber: %s received: %s",
            self.label,
            self.subscriber_id,
            message.content,
        )


class WeatherSubscriber(_RecordingSubscriber):
    label = "Weather"


class CustomerSupportSubscriber(_RecordingSubscriber):
    label = "Customer Support"


class DelayedWeatherSubscriber(WeatherSubscriber):
    """Weather subscriber that takes a while to handle each message."""

    label = "Delayed Weather"

    def __init__(self, subscriber_id: Optional[str] = None, delay_sec: float = DEFAULT_DELAY_SEC) -> None:
        super().__init__(subscriber_id)
        self._delay_sec = delay_sec

    def on_message(self, message: Message) -> None:
        time.sleep(self._delay_sec)
        super().on_message(message)
