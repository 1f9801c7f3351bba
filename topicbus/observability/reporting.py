"""Delivery failure reporting.

A reporter is any callable taking a SubscriberDeliveryError. The dispatch pool
hands every failed delivery to its reporter; the default one logs it.
"""

import logging
from typing import Callable, List

from topicbus.errors import SubscriberDeliveryError
from topicbus.observability.logger import get_logger

ErrorReporter = Callable[[SubscriberDeliveryError], None]


class LoggingErrorReporter:
    """Logs each failed delivery at ERROR with the subscriber's traceback."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("topicbus.dispatch")

    def __call__(self, error: SubscriberDeliveryError) -> None:
        original = error.original
        self._logger.error(
            "delivery_failed",
            exc_info=(type(original), original, original.__traceback__),
            extra={
                "topic": error.delivered.topic,
                "message_id": error.delivered.message_id,
                "subscriber": repr(error.subscriber),
                "error": str(original),
            },
        )


class CollectingErrorReporter:
    """Keeps reported errors in memory, e.g. for inspection after a run."""

    def __init__(self) -> None:
        self.errors: List[SubscriberDeliveryError] = []

    def __call__(self, error: SubscriberDeliveryError) -> None:
        self.errors.append(error)
