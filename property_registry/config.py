"""Configuration management for the property registry."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from property_registry.exceptions import ConfigurationError

SINK_NAMES = ("console", "json", "kafka", "memory")
LOG_FORMATS = ("standard", "json")


@dataclass
class KafkaConfig:
    """Kafka producer configuration for notification delivery."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    topic_prefix: str = "registry.property"

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration for file based sinks."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class RegistryConfig:
    """Main configuration for the property registry."""

    contract_owner: str = "0x0000000000000000000000000000000000000001"
    sinks: list[str] = field(default_factory=list)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check the configuration, raising ``ConfigurationError`` on problems."""
        if not self.contract_owner:
            raise ConfigurationError("contract_owner must be set")

        unknown = [name for name in self.sinks if name not in SINK_NAMES]
        if unknown:
            raise ConfigurationError(f"Unknown sink(s): {', '.join(unknown)}")

        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            topic_prefix=os.getenv("TOPIC_PREFIX", "registry.property"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        sinks_str = os.getenv("REGISTRY_SINKS", "")
        sinks = [name.strip() for name in sinks_str.split(",") if name.strip()]

        return cls(
            contract_owner=os.getenv(
                "REGISTRY_CONTRACT_OWNER", "0x0000000000000000000000000000000000000001"
            ),
            sinks=sinks,
            kafka=kafka,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
