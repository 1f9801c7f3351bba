"""Observability: logging, metrics and delivery-error reporting."""

from topicbus.observability.logger import get_logger
from topicbus.observability.metrics import Metrics
from topicbus.observability.reporting import (
    CollectingErrorReporter,
    ErrorReporter,
    LoggingErrorReporter,
)

__all__ = [
    "get_logger",
    "Metrics",
    "ErrorReporter",
    "LoggingErrorReporter",
    "CollectingErrorReporter",
]
