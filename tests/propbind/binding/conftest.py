"""Shared configuration types for binding tests."""

from dataclasses import dataclass

from propbind.binding import ConfigurationProperties, configuration_properties


@configuration_properties("server")
class ServerProperties(ConfigurationProperties):
    """Configuration type bound from ``server.*``."""

    host: str = "localhost"
    port: int = 8080


@configuration_properties("cache")
class CacheProperties(ConfigurationProperties):
    """Configuration type bound from ``cache.*``."""

    hosts: list[str] = []
    ttl_seconds: int = 60


@configuration_properties("mail")
@dataclass(frozen=True)
class MailProperties:
    """Dataclass configuration type, bound through a TypeAdapter."""

    sender: str
    retries: int = 3


class DatabaseProperties(ConfigurationProperties, prefix="db"):
    """Configuration type declaring its prefix as a class keyword."""

    url: str
    pool_size: int = 5


class ExtendedServerProperties(ServerProperties):
    """Subclass of a configuration type without its own marker."""

    pass


@configuration_properties("legacy")
class OpaqueProperties:
    """Marked class that pydantic cannot build a validator for."""

    def __init__(self, flag: object) -> None:
        self.flag = flag


class PlainService:
    """Class without the configuration-binding marker."""

    pass


class RecordingTypeRegistrar:
    """Type registrar that records the types it receives."""

    def __init__(self, registry: object = None) -> None:
        self.registry = registry
        self.registered: list[type] = []

    def register(self, config_type: type) -> None:
        self.registered.append(config_type)
