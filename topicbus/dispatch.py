"""Worker pool running subscriber callbacks off the publishing thread."""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, List, Optional, Sequence

from topicbus.errors import PublisherClosedError, SubscriberDeliveryError
from topicbus.observability import LoggingErrorReporter, Metrics, get_logger
from topicbus.observability import metrics as metric_names
from topicbus.subscriber import SubscriberLike, notify

if TYPE_CHECKING:
    from topicbus.message import Message
    from topicbus.observability import ErrorReporter


class DispatchPool:
    """Runs one delivery task per (subscriber, message) pair in a thread pool.

    Tasks are submitted in call order but may finish in any order. A failing
    subscriber is isolated to its own task: the exception is wrapped in a
    SubscriberDeliveryError and handed to the reporter, never re-raised.
    """

    def __init__(
        self,
        max_workers: int = 4,
        thread_name_prefix: str = "topicbus-dispatch",
        reporter: Optional["ErrorReporter"] = None,
        metrics: Optional[Metrics] = None,
        log_level: int | str = "INFO",
    ) -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=thread_name_prefix,
        )
        self._logger = get_logger("topicbus.dispatch", log_level)
        self._reporter = reporter or LoggingErrorReporter(self._logger)
        self._metrics = metrics or Metrics()
        self._pending = 0
        self._idle = threading.Condition()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of submitted deliveries that have not finished yet."""
        with self._idle:
            return self._pending

    def submit(self, subscriber: SubscriberLike, message: "Message") -> Future:
        """Queue delivery of message to subscriber and return immediately."""
        return self.submit_all((subscriber,), message)[0]

    def submit_all(self, subscribers: Sequence[SubscriberLike], message: "Message") -> List[Future]:
        """Queue one delivery per subscriber, all or none.

        The closed check and every submission happen under the same lock that
        shutdown() takes, so a concurrent shutdown either sees the whole batch
        queued or rejects it before anything is submitted.
        """
        with self._idle:
            if self._closed:
                raise PublisherClosedError("dispatch pool is closed")
            futures = [self._executor.submit(self._deliver, s, message) for s in subscribers]
            self._pending += len(futures)
        self._metrics.increment(metric_names.DELIVERIES_SUBMITTED, len(futures))
        return futures

    def _deliver(self, subscriber: SubscriberLike, message: "Message") -> None:
        try:
            notify(subscriber, message)
        except Exception as e:
            self._metrics.increment(metric_names.DELIVERIES_FAILED)
            self._report(SubscriberDeliveryError(subscriber, message, e))
        else:
            self._metrics.increment(metric_names.DELIVERIES_SUCCEEDED)
        finally:
            self._task_done()

    def _report(self, error: SubscriberDeliveryError) -> None:
        try:
            self._reporter(error)
        except Exception:
            self._logger.exception(
                "reporter_failed",
                extra={"message_id": error.delivered.message_id, "subscriber": repr(error.subscriber)},
            )

    def _task_done(self) -> None:
        with self._idle:
            self._pending -= 1
            if self._pending == 0:
                self._idle.notify_all()

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until no deliveries are pending. Returns False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: self._pending == 0, timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting deliveries; with wait=True, finish the queued ones first."""
        with self._idle:
            self._closed = True
        self._executor.shutdown(wait=wait)
