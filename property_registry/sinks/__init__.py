"""Output sinks for registry notifications."""

from property_registry.config import RegistryConfig
from property_registry.sinks.base import NotificationSink
from property_registry.sinks.console import ConsoleSink
from property_registry.sinks.json_file import JsonFileSink
from property_registry.sinks.memory import MemorySink


def build_sinks(config: RegistryConfig) -> list[NotificationSink]:
    """Instantiate the sinks named in the configuration."""
    sinks: list[NotificationSink] = []
    for name in config.sinks:
        if name == "console":
            sinks.append(ConsoleSink(pretty=config.output.pretty_json))
        elif name == "json":
            sinks.append(JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json))
        elif name == "kafka":
            from property_registry.sinks.kafka import KafkaSink

            sinks.append(KafkaSink(config.kafka))
        elif name == "memory":
            sinks.append(MemorySink())
    return sinks


__all__ = ["ConsoleSink", "JsonFileSink", "MemorySink", "NotificationSink", "build_sinks"]
