"""Example: weather and customer-support topics with asynchronous fan-out."""

import logging

from topicbus import DefaultPublisher, Message, MessageType, TopicName, load_settings
from topicbus.demo_subscribers import (
    CustomerSupportSubscriber,
    DelayedWeatherSubscriber,
    WeatherSubscriber,
)

logging.basicConfig(level=logging.INFO)


def main() -> None:
    settings = load_settings()
    with DefaultPublisher("example", settings=settings) as publisher:
        weather = WeatherSubscriber("weather-1")
        delayed = DelayedWeatherSubscriber("weather-delayed")
        support = CustomerSupportSubscriber("support-1")

        publisher.subscribe(TopicName.WEATHER, weather)
        publisher.subscribe(TopicName.WEATHER, delayed)
        publisher.subscribe(TopicName.CUSTOMER_SUPPORT, support)

        publisher.publish(Message(TopicName.WEATHER, MessageType.UPDATE, "earthquake"))
        publisher.publish(Message(TopicName.CUSTOMER_SUPPORT, MessageType.CUSTOMER_SUPPORT_REQUEST, "support@test.de"))
        # nobody listens on temperature: dropped without error
        publisher.publish(Message(TopicName.TEMPERATURE, MessageType.TEMPERATURE_READING, "23C"))

        publisher.wait_idle(timeout=5)
        publisher.unsubscribe(TopicName.WEATHER, delayed)
        publisher.publish(Message(TopicName.WEATHER, MessageType.UPDATE, "tsunami"))
        publisher.wait_idle(timeout=5)

        print(publisher.topic_stats())


if __name__ == "__main__":
    main()
