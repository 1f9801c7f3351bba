"""Response shapes for the read-only inspection API (health, topics, stats)."""

from dataclasses import dataclass
from typing import Any, Dict, List

ERROR_UNAUTHORIZED = "UNAUTHORIZED"


@dataclass
class HealthResponse:
    """Response for GET /health."""
    uptime_sec: float
    topics: int
    subscribers: int
    pending_deliveries: int = 0
    closed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uptime_sec": int(self.uptime_sec),
            "topics": self.topics,
            "subscribers": self.subscribers,
            "pending_deliveries": self.pending_deliveries,
            "closed": self.closed,
        }


def topics_list_response(topics: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Response for GET /topics."""
    return {"topics": topics}


def stats_response(
    topics_stats: Dict[str, Dict[str, int]],
    metrics: Dict[str, Dict[str, int]],
) -> Dict[str, Any]:
    """Response for GET /stats."""
    return {"topics": topics_stats, "metrics": metrics}


def error_response(code: str, message: str) -> Dict[str, Any]:
    return {"error": code, "message": message}
