"""Core value types shared across the event subscription machinery."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class SpeakerId:
    """Unique identifier for a Sonos speaker."""

    value: str

    def __post_init__(self) -> None:
        if isinstance(self.value, SpeakerId):
            object.__setattr__(self, "value", self.value.value)
        elif not isinstance(self.value, str):
            raise TypeError(f"speaker id must be a string, got {type(self.value).__name__}")

    def as_str(self) -> str:
        """Return the identifier as a plain string."""
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass
class Speaker:
    """A Sonos speaker on the network."""

    id: SpeakerId
    ip: IPAddress
    name: str
    room: str

    def __post_init__(self) -> None:
        if not isinstance(self.id, SpeakerId):
            self.id = SpeakerId(self.id)
        if not isinstance(self.ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            self.ip = ipaddress.ip_address(self.ip)


class ServiceType(Enum):
    """UPnP service types that can be subscribed to."""

    AV_TRANSPORT = "AVTransport"
    RENDERING_CONTROL = "RenderingControl"
    ZONE_GROUP_TOPOLOGY = "ZoneGroupTopology"

    def __str__(self) -> str:
        return self.value


class SubscriptionScope(Enum):
    """Whether a service needs one subscription per speaker or one per network."""

    PER_SPEAKER = "PerSpeaker"
    NETWORK_WIDE = "NetworkWide"


@dataclass(frozen=True)
class SubscriptionKey:
    """Key identifying a subscription: one speaker and one service."""

    speaker_id: SpeakerId
    service_type: ServiceType


@dataclass
class BrokerConfig:
    """Configuration for the event broker."""

    callback_port_range: tuple[int, int] = (3400, 3500)
    subscription_timeout: timedelta = field(default_factory=lambda: timedelta(seconds=1800))
    renewal_threshold: timedelta = field(default_factory=lambda: timedelta(seconds=300))
    max_retry_attempts: int = 3
    retry_backoff_base: timedelta = field(default_factory=lambda: timedelta(seconds=2))
    event_buffer_size: int = 100


@dataclass
class RawEvent:
    """An unparsed UPnP event notification tagged with its speaker and service."""

    subscription_id: str
    speaker_id: SpeakerId
    service_type: ServiceType
    event_xml: str


@dataclass
class SubscriptionConfig:
    """Settings for an individual subscription."""

    timeout_seconds: int
    callback_url: str