"""Message class carrying topic, type tag and content."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from topicbus.errors import InvalidMessageError


class MessageType(str, Enum):
    """Known message type tags. Other strings are accepted as well."""

    UPDATE = "UPDATE"
    CUSTOMER_CREATED = "CUSTOMER_CREATED"
    CUSTOMER_SUPPORT_REQUEST = "CUSTOMER_SUPPORT_REQUEST"
    TEMPERATURE_READING = "TEMPERATURE_READING"


def topic_key(name: Any) -> str:
    """Normalize a topic name (plain string or string Enum member) to a plain str."""
    if isinstance(name, Enum):
        name = name.value
    return name


@dataclass(frozen=True)
class Message:
    """Immutable message published to a topic."""

    topic: str
    type: Union[MessageType, str]
    content: str
    message_id: Optional[str] = None
    timestamp: Optional[datetime] = None
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        topic = topic_key(self.topic)
        if not isinstance(topic, str) or not topic.strip():
            raise InvalidMessageError(f"message topic must be a non-empty string, got {self.topic!r}")
        # frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, "topic", topic)
        if self.timestamp is None:
            object.__setattr__(self, "timestamp", datetime.now(timezone.utc))
        if self.message_id is None:
            object.__setattr__(self, "message_id", uuid.uuid4().hex)
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def type_name(self) -> str:
        return self.type.value if isinstance(self.type, Enum) else str(self.type)

    def to_dict(self) -> dict:
        """Serialize message for logging."""
        return {
            "message_id": self.message_id,
            "topic": self.topic,
            "type": self.type_name,
            "content": self.content,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "metadata": dict(self.metadata),
        }
