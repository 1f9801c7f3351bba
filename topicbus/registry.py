"""Thread-safe registry of topics owned by one publisher."""

import threading
from typing import Dict, List, Optional

from topicbus.topic import Topic


class TopicRegistry:
    """Maps topic names to Topic instances; at most one Topic exists per name."""

    def __init__(self) -> None:
        self._topics: Dict[str, Topic] = {}
        self._lock = threading.Lock()

    def get_or_create_topic(self, name: str) -> Topic:
        """Return the existing topic or create and register a new one (first writer wins)."""
        with self._lock:
            topic = self._topics.get(name)
            if topic is None:
                topic = Topic(name)
                self._topics[name] = topic
            return topic

    def get_topic(self, name: str) -> Optional[Topic]:
        """Return topic by name or None."""
        with self._lock:
            return self._topics.get(name)

    def topics(self) -> List[Topic]:
        with self._lock:
            return list(self._topics.values())

    def topic_count(self) -> int:
        """Number of topics."""
        with self._lock:
            return len(self._topics)

    def total_subscriber_count(self) -> int:
        """Sum of subscriptions over all topics (a subscriber on two topics counts twice)."""
        return sum(topic.subscriber_count for topic in self.topics())

    def list_topics(self) -> List[Dict[str, object]]:
        """Return list of {name, subscribers} for each topic."""
        return [
            {"name": t.name, "subscribers": t.subscriber_count}
            for t in self.topics()
        ]

    def topic_stats(self) -> Dict[str, Dict[str, int]]:
        """Return { topic_name: { messages, subscribers } } for the stats endpoint."""
        return {
            topic.name: {
                "messages": topic.messages_published,
                "subscribers": topic.subscriber_count,
            }
            for topic in self.topics()
        }
