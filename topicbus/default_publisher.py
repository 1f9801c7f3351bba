"""Concrete Publisher implementation (in-memory broker with async fan-out)."""

from typing import Any, Dict, List, Optional

from topicbus.config import PubSubSettings
from topicbus.dispatch import DispatchPool
from topicbus.errors import PublisherClosedError
from topicbus.message import Message, topic_key
from topicbus.observability import ErrorReporter, Metrics
from topicbus.observability import metrics as metric_names
from topicbus.publisher import Publisher
from topicbus.registry import TopicRegistry
from topicbus.subscriber import Subscriber, SubscriberLike, ensure_subscriber
from topicbus.topic import Topic


class DefaultPublisher(Publisher):
    """Broker that owns its topics and delivers through a DispatchPool.

    publish() snapshots the topic's subscribers and submits one task per
    subscriber; it never waits for delivery. Use close() (or a with-block)
    to shut the worker pool down.
    """

    def __init__(
        self,
        publisher_id: str = "default",
        settings: Optional[PubSubSettings] = None,
        reporter: Optional[ErrorReporter] = None,
    ) -> None:
        self._settings = settings or PubSubSettings()
        super().__init__(publisher_id, self._settings.log_level)
        self._registry = TopicRegistry()
        self._metrics = Metrics()
        self._pool = DispatchPool(
            max_workers=self._settings.max_workers,
            thread_name_prefix=self._settings.thread_name_prefix,
            reporter=reporter,
            metrics=self._metrics,
            log_level=self._settings.log_level,
        )

    @property
    def settings(self) -> PubSubSettings:
        return self._settings

    @property
    def registry(self) -> TopicRegistry:
        return self._registry

    @property
    def closed(self) -> bool:
        return self._pool.closed

    def subscribe(self, topic_name: Any, subscriber: SubscriberLike) -> None:
        """Create the topic if absent, then register the subscriber (idempotent)."""
        ensure_subscriber(subscriber)
        name = topic_key(topic_name)
        topic = self._registry.get_or_create_topic(name)
        self._metrics.set_gauge(metric_names.TOPICS, self._registry.topic_count())
        if topic.register(subscriber) and isinstance(subscriber, Subscriber):
            subscriber.on_subscribe(name)

    def unsubscribe(self, topic_name: Any, subscriber: SubscriberLike) -> None:
        """Remove the subscriber if present; unknown topic or subscriber is a no-op."""
        name = topic_key(topic_name)
        topic = self._registry.get_topic(name)
        if topic is None:
            return
        if topic.unregister(subscriber) and isinstance(subscriber, Subscriber):
            subscriber.on_unsubscribe(name)

    def publish(self, message: Message) -> None:
        """Submit one delivery per current subscriber of message.topic and return."""
        if not isinstance(message, Message):
            raise TypeError(f"publish expects a Message, got {type(message).__name__}")
        if self._pool.closed:
            raise PublisherClosedError(f"publisher {self._publisher_id!r} is closed")
        topic = self._registry.get_topic(message.topic)
        if topic is None:
            self._metrics.increment(metric_names.MESSAGES_UNROUTED)
            self._logger.debug(
                "no_topic",
                extra={"topic": message.topic, "message_id": message.message_id},
            )
            return
        subscribers = topic.current_subscribers()
        self._pool.submit_all(subscribers, message)
        topic.record_published()
        self._metrics.increment(metric_names.MESSAGES_PUBLISHED)
        self.on_publish(message, len(subscribers))

    def get_topic(self, topic_name: Any) -> Optional[Topic]:
        return self._registry.get_topic(topic_key(topic_name))

    def list_topics(self) -> List[Dict[str, object]]:
        return self._registry.list_topics()

    def topic_stats(self) -> Dict[str, Dict[str, int]]:
        return self._registry.topic_stats()

    def metrics(self) -> Dict[str, Dict[str, int]]:
        """Snapshot of publish/delivery counters and gauges."""
        return self._metrics.snapshot()

    @property
    def pending_deliveries(self) -> int:
        return self._pool.pending

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until every submitted delivery has finished. Returns False on timeout."""
        return self._pool.wait_idle(timeout)

    def close(self, wait: bool = True) -> None:
        """Stop accepting publishes and shut the worker pool down."""
        if self._pool.closed:
            return
        self._pool.shutdown(wait=wait)
        self._logger.info("closed", extra={"publisher_id": self._publisher_id})

    def __enter__(self) -> "DefaultPublisher":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
