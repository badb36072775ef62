"""Kafka sink for streaming notifications to Kafka topics."""

import json
import logging
from dataclasses import dataclass

from confluent_kafka import KafkaException, Producer

from property_registry.config import KafkaConfig
from property_registry.exceptions import SinkError
from property_registry.models import Event
from property_registry.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaSink:
    """Publish notifications to Kafka, one topic per event type.

    Messages are keyed by property id so every notification for a property
    lands on the same partition and keeps its order.
    """

    def __init__(self, config: KafkaConfig | str) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats()

    def topic_for(self, event_type: str) -> str:
        """Map an event type to its topic name."""
        # property.value_updated -> registry.property.value-updated
        action = event_type.split(".")[-1].replace("_", "-")
        return f"{self.config.topic_prefix}.{action}"

    def _delivery_callback(self, err, msg) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def publish(self, event: Event) -> None:
        """Send a single event."""
        value = json.dumps(to_dict(event), ensure_ascii=False, default=str).encode("utf-8")
        try:
            self.producer.produce(
                topic=self.topic_for(event.event_type),
                key=event.subject.encode("utf-8"),
                value=value,
                callback=self._delivery_callback,
            )
        except (BufferError, KafkaException) as e:
            raise SinkError(f"Failed to enqueue {event.event_type} event: {e}") from e
        self.stats.sent += 1
        self.producer.poll(0)

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
