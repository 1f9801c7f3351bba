import pytest
from fastapi.testclient import TestClient

from topicbus import DefaultPublisher, Message, MessageType, PubSubSettings
from topicbus.server import create_app

from conftest import WAIT_SEC, CollectingSubscriber


@pytest.fixture
def client(publisher):
    with TestClient(create_app(publisher)) as c:
        yield c


def test_health_empty(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["topics"] == 0
    assert body["subscribers"] == 0
    assert body["pending_deliveries"] == 0
    assert body["closed"] is False
    assert isinstance(body["uptime_sec"], int)


def test_topics_and_health_counts(client, publisher):
    publisher.subscribe("weather", CollectingSubscriber("a"))
    publisher.subscribe("weather", CollectingSubscriber("b"))
    publisher.subscribe("customer_support", CollectingSubscriber("c"))

    topics = client.get("/api/v1/topics").json()["topics"]
    assert sorted(topics, key=lambda t: t["name"]) == [
        {"name": "customer_support", "subscribers": 1},
        {"name": "weather", "subscribers": 2},
    ]
    health = client.get("/api/v1/health").json()
    assert health["topics"] == 2
    assert health["subscribers"] == 3


def test_stats_counts_messages(client, publisher):
    publisher.subscribe("weather", CollectingSubscriber("a"))
    publisher.publish(Message("weather", MessageType.UPDATE, "rain"))
    publisher.publish(Message("nowhere", MessageType.UPDATE, "lost"))
    assert publisher.wait_idle(WAIT_SEC)

    body = client.get("/api/v1/stats").json()
    assert body["topics"] == {"weather": {"messages": 1, "subscribers": 1}}
    assert body["metrics"]["counters"]["messages_published"] == 1
    assert body["metrics"]["counters"]["messages_unrouted"] == 1


def test_no_publish_endpoint(client):
    resp = client.post("/api/v1/publish", json={"topic": "weather"})
    assert resp.status_code in (404, 405)


def test_api_key_required_when_configured(reporter):
    pub = DefaultPublisher("secured", settings=PubSubSettings(api_key="s3cret"), reporter=reporter)
    try:
        client = TestClient(create_app(pub))
        missing = client.get("/api/v1/health")
        wrong = client.get("/api/v1/health", headers={"X-API-Key": "nope"})
        ok = client.get("/api/v1/health", headers={"X-API-Key": "s3cret"})
    finally:
        pub.close()

    assert missing.status_code == 401
    assert missing.json()["error"] == "UNAUTHORIZED"
    assert wrong.status_code == 401
    assert ok.status_code == 200


def test_explicit_api_key_overrides_settings(publisher):
    client = TestClient(create_app(publisher, api_key="k"))
    assert client.get("/api/v1/topics").status_code == 401
    assert client.get("/api/v1/topics", headers={"X-API-Key": "k"}).status_code == 200


def test_health_reports_closed(client, publisher):
    publisher.close()
    assert client.get("/api/v1/health").json()["closed"] is True
